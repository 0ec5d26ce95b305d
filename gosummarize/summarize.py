from __future__ import annotations

import logging
from typing import Iterable, TextIO

from .errors import ParseError
from .fs_scan import find_go_files
from .go_parse import parse_go_file
from .model import FileError, GoFile, RunReport
from .render import render_declaration

log = logging.getLogger(__name__)

FILE_START = "<<<FILE_START>>>"
FILE_END = "<<<FILE_END>>>"


def summarize_file(path: str, out: TextIO) -> GoFile:
	"""Write the exported-API block for one file.

	The file is parsed before anything is written, so a ``ParseError``
	leaves ``out`` untouched.
	"""
	go_file = parse_go_file(path)
	out.write(f"{FILE_START} {path}\n\n")
	for decl in go_file.declarations:
		render_declaration(decl, out)
	out.write(f"{FILE_END} {path}\n\n")
	return go_file


def summarize_files(paths: Iterable[str], out: TextIO) -> RunReport:
	report = RunReport()
	for path in paths:
		report.files.append(path)
		try:
			summarize_file(path, out)
		except ParseError as exc:
			log.error("%s", exc)
			report.errors.append(FileError(path=path, error=str(exc)))
			continue
		report.summarized.append(path)
	return report


def summarize_tree(root: str, exclude_tests: bool, out: TextIO) -> RunReport:
	return summarize_files(find_go_files(root, exclude_tests), out)
