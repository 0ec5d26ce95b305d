from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, Dict, Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .doc_comments import doc_for
from .errors import ParseError
from .model import Declaration, FieldInfo, FuncDecl, GoFile, Receiver, TypeDecl, ValueDecl
from .printer import NodePrinter, named_children

log = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())


@lru_cache(maxsize=1)
def _parser() -> Parser:
	return Parser(GO_LANGUAGE)


def _position(node: Node) -> str:
	row, column = node.start_point
	return f"{row + 1}:{column + 1}"


def _first_error(node: Node) -> Optional[Node]:
	for child in node.children:
		if child.type == "ERROR" or child.is_missing:
			return child
		if child.has_error:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def _check_syntax(path: str, root: Node, source: bytes) -> None:
	if not root.has_error:
		return
	bad = _first_error(root) or root
	if bad.is_missing:
		raise ParseError(path, f"{path}:{_position(bad)}: missing '{bad.type}'")
	snippet = source[bad.start_byte:bad.end_byte].decode("utf-8").split("\n", 1)[0].strip()
	raise ParseError(path, f"{path}:{_position(bad)}: syntax error near {snippet!r}")


def _function(node: Node, doc: str, printer: NodePrinter) -> Iterator[Declaration]:
	receiver = None
	recv_params = printer.params(node.child_by_field_name("receiver"))
	if recv_params:
		first = recv_params[0]
		receiver = Receiver(name=first.names[0] if first.names else None, type=first.type)
	yield FuncDecl(
		name=printer.text(node.child_by_field_name("name")),
		doc=doc,
		line=node.start_point[0] + 1,
		signature=printer.signature(node),
		receiver=receiver,
	)


def _struct_fields(struct_node: Node, printer: NodePrinter) -> List[FieldInfo]:
	fields: List[FieldInfo] = []
	field_list = next((c for c in struct_node.named_children if c.type == "field_declaration_list"), None)
	if field_list is None:
		return fields
	siblings = list(field_list.named_children)
	for index, child in enumerate(siblings):
		if child.type != "field_declaration":
			continue
		names = [printer.text(n) for n in child.children_by_field_name("name")]
		type_text = printer.type_text(child.child_by_field_name("type"))
		if not names and any(c.type == "*" for c in child.children):
			# embedded pointer: the '*' is not part of the type node
			type_text = "*" + type_text
		fields.append(
			FieldInfo(
				names=names,
				type=type_text,
				doc=doc_for(siblings, index, printer.source, floor_row=field_list.start_point[0]),
			)
		)
	return fields


def _types(node: Node, doc: str, printer: NodePrinter) -> Iterator[Declaration]:
	for spec in named_children(node):
		if spec.type not in ("type_spec", "type_alias"):
			continue
		type_node = spec.child_by_field_name("type")
		fields = None
		if type_node.type == "struct_type":
			fields = _struct_fields(type_node, printer)
		yield TypeDecl(
			name=printer.text(spec.child_by_field_name("name")),
			doc=doc,
			line=spec.start_point[0] + 1,
			type_params=printer.type_params(spec.child_by_field_name("type_parameters")),
			alias=spec.type == "type_alias",
			definition=printer.type_text(type_node),
			fields=fields,
		)


def _value_specs(node: Node) -> Iterator[Node]:
	for child in named_children(node):
		if child.type in ("const_spec", "var_spec"):
			yield child
		elif child.type == "var_spec_list":
			yield from _value_specs(child)


def _values(node: Node, doc: str, printer: NodePrinter) -> Iterator[Declaration]:
	kind = "const" if node.type == "const_declaration" else "var"
	for spec in _value_specs(node):
		type_node = spec.child_by_field_name("type")
		value = spec.child_by_field_name("value")
		yield ValueDecl(
			kind=kind,
			names=[printer.text(n) for n in spec.children_by_field_name("name")],
			type=printer.type_text(type_node) if type_node is not None else None,
			values=[printer.text(v) for v in named_children(value)] if value is not None else [],
			doc=doc,
			line=spec.start_point[0] + 1,
		)


_BUILDERS: Dict[str, Callable[[Node, str, NodePrinter], Iterator[Declaration]]] = {
	"function_declaration": _function,
	"method_declaration": _function,
	"type_declaration": _types,
	"const_declaration": _values,
	"var_declaration": _values,
}


def parse_go_source(path: str, source: bytes) -> GoFile:
	"""Parse Go ``source`` into its top-level declarations, in source order.

	Raises ``ParseError`` for invalid UTF-8, any syntax error, a missing
	package clause, or a statement at the top level.
	"""
	try:
		source.decode("utf-8")
	except UnicodeDecodeError as exc:
		raise ParseError(path, f"illegal UTF-8 encoding at byte {exc.start}") from exc

	root = _parser().parse(source).root_node
	_check_syntax(path, root, source)

	printer = NodePrinter(source)
	siblings = list(root.named_children)
	package: Optional[str] = None
	declarations: List[Declaration] = []
	for index, node in enumerate(siblings):
		if node.type == "comment":
			continue
		if package is None:
			if node.type != "package_clause":
				raise ParseError(path, f"{path}:{_position(node)}: expected 'package', found {node.type}")
			package = printer.text(named_children(node)[0])
			continue
		if node.type == "import_declaration":
			continue
		builder = _BUILDERS.get(node.type)
		if builder is None:
			raise ParseError(path, f"{path}:{_position(node)}: expected declaration, found {node.type}")
		declarations.extend(builder(node, doc_for(siblings, index, source), printer))

	if package is None:
		raise ParseError(path, f"{path}: expected 'package', found 'EOF'")
	log.debug("parsed %s: package %s, %d declarations", path, package, len(declarations))
	return GoFile(path=path, package=package, declarations=declarations)


def parse_go_file(path: str) -> GoFile:
	try:
		with open(path, "rb") as fh:
			source = fh.read()
	except OSError as exc:
		raise ParseError(path, exc.strerror or str(exc)) from exc
	return parse_go_source(path, source)
