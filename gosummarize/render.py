from __future__ import annotations

import textwrap
from typing import TextIO

from .model import Declaration, FuncDecl, TypeDecl, ValueDecl
from .printer import format_signature

DOC_INDENT = "    "


def is_exported(name: str) -> bool:
	return name[:1].isupper()


def _write_doc(out: TextIO, doc: str) -> None:
	"""Write the trimmed doc under its declaration, every line indented.

	The Go tool indented only the first line of a multi-line doc; indenting
	all of them keeps a doc from being read as the next declaration.
	"""
	doc = doc.strip()
	if doc:
		out.write(textwrap.indent(doc, DOC_INDENT) + "\n")


def _render_func(decl: FuncDecl, out: TextIO) -> None:
	if not is_exported(decl.name):
		return
	signature = format_signature(decl.signature)
	receiver = decl.receiver
	if receiver is None:
		out.write(f"func {decl.name}{signature}\n")
	elif receiver.name:
		out.write(f"func ({receiver.name} {receiver.type}) {decl.name}{signature}\n")
	else:
		out.write(f"func ({receiver.type}) {decl.name}{signature}\n")
	_write_doc(out, decl.doc)
	out.write("\n")


def _render_type(decl: TypeDecl, out: TextIO) -> None:
	if not is_exported(decl.name):
		return
	header = f"type {decl.name}{decl.type_params}"
	if decl.fields is not None:
		out.write(f"{header} struct {{\n")
		for field in decl.fields:
			for name in field.names:
				if not is_exported(name):
					continue
				for line in field.doc.strip().splitlines():
					out.write(f"\t// {line}".rstrip() + "\n")
				out.write(f"\t{name}\t{field.type}\n")
		out.write("}\n")
	elif decl.alias:
		out.write(f"{header} = {decl.definition}\n")
	else:
		out.write(f"{header} {decl.definition}\n")
	_write_doc(out, decl.doc)
	out.write("\n")


def _render_values(decl: ValueDecl, out: TextIO) -> None:
	for index, name in enumerate(decl.names):
		if not is_exported(name):
			continue
		line = f"{decl.kind} {name}"
		if decl.type:
			line += f" {decl.type}"
		# values align by position; carried-over const expressions are not replayed
		if index < len(decl.values):
			line += f" = {decl.values[index]}"
		out.write(line + "\n")
		_write_doc(out, decl.doc)
		out.write("\n")


def render_declaration(decl: Declaration, out: TextIO) -> None:
	"""Write the exported parts of one declaration to ``out``."""
	if isinstance(decl, FuncDecl):
		_render_func(decl, out)
	elif isinstance(decl, TypeDecl):
		_render_type(decl, out)
	elif isinstance(decl, ValueDecl):
		_render_values(decl, out)
