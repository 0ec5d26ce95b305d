"""Exported-API digests for Go source trees.

Modules:
- fs_scan.py: Filesystem discovery of Go source files.
- go_parse.py: tree-sitter parsing of Go files into declaration models.
- doc_comments.py: Go doc-comment attachment and text normalisation.
- printer.py: Re-serialisation of types, signatures and expressions.
- model.py: Declaration and report models.
- render.py: Rendering of exported declarations.
- summarize.py: Per-file and per-run summarisation.
- errors.py, config.py, logging_setup.py: Errors, settings and logging.
- cli.py, api.py: Command line and HTTP entry points.
"""

__all__ = [
	"fs_scan",
	"go_parse",
	"doc_comments",
	"printer",
	"model",
	"render",
	"summarize",
	"cli",
	"api",
]
