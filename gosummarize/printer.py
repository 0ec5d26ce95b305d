"""Re-serialisation of Go syntax nodes.

Type expressions and parameter lists are rebuilt from their parts, so the
result is canonical however the source was spaced. Any other node (struct
and interface bodies, initializer expressions) is reproduced from the
original bytes with its comments removed and its continuation lines
re-indented relative to the line it starts on.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from tree_sitter import Node

from .model import Param, Signature


def named_children(node: Node) -> List[Node]:
	"""Named children of ``node`` without comments."""
	return [c for c in node.named_children if c.type != "comment"]


def param_text(param: Param) -> str:
	if param.names:
		return f"{', '.join(param.names)} {param.type}"
	return param.type


def format_signature(signature: Signature) -> str:
	"""Render ``[T any](a int) (int, error)``, without the ``func`` keyword."""
	text = f"{signature.type_params}({', '.join(param_text(p) for p in signature.params)})"
	results = signature.results
	if len(results) == 1 and not results[0].names:
		# single anonymous result; no parentheses
		return f"{text} {results[0].type}"
	if results:
		return f"{text} ({', '.join(param_text(p) for p in results)})"
	return text


class NodePrinter:
	def __init__(self, source: bytes):
		self.source = source
		self._type_printers: Dict[str, Callable[[Node], str]] = {
			"pointer_type": self._pointer_type,
			"slice_type": self._slice_type,
			"array_type": self._array_type,
			"implicit_length_array_type": self._implicit_length_array_type,
			"map_type": self._map_type,
			"channel_type": self._channel_type,
			"function_type": self._function_type,
			"qualified_type": self._qualified_type,
			"generic_type": self._generic_type,
			"parenthesized_type": self._parenthesized_type,
		}

	# -- verbatim text ------------------------------------------------------

	def text(self, node: Node) -> str:
		"""Source text of ``node`` with comments stripped."""
		start, end = node.start_byte, node.end_byte
		chunks: List[bytes] = []
		cursor = start
		for comment in self._comments_in(node):
			cut_start, cut_end = self._comment_span(comment, start, end)
			chunks.append(self.source[cursor:cut_start])
			cursor = cut_end
		chunks.append(self.source[cursor:end])
		raw = b"".join(chunks).decode("utf-8")

		indent = self._line_indent(start)
		lines = [line.rstrip() for line in raw.split("\n")]
		for i in range(1, len(lines)):
			if indent and lines[i].startswith(indent):
				lines[i] = lines[i][len(indent):]
		return "\n".join(lines)

	def _comments_in(self, node: Node) -> List[Node]:
		found: List[Node] = []
		for child in node.children:
			if child.type == "comment":
				found.append(child)
			elif child.child_count:
				found.extend(self._comments_in(child))
		return found

	def _comment_span(self, comment: Node, floor: int, ceiling: int) -> Tuple[int, int]:
		cut_start = comment.start_byte
		while cut_start > floor and self.source[cut_start - 1:cut_start] in (b" ", b"\t"):
			cut_start -= 1
		cut_end = comment.end_byte
		whole_line = self.source[cut_start - 1:cut_start] == b"\n"
		if whole_line and cut_end < ceiling and self.source[cut_end:cut_end + 1] == b"\n":
			cut_end += 1
		return cut_start, cut_end

	def _line_indent(self, pos: int) -> str:
		line_start = self.source.rfind(b"\n", 0, pos) + 1
		prefix = self.source[line_start:pos]
		return prefix[: len(prefix) - len(prefix.lstrip(b" \t"))].decode("utf-8")

	# -- types --------------------------------------------------------------

	def type_text(self, node: Node) -> str:
		printer = self._type_printers.get(node.type)
		if printer is None:
			return self.text(node)
		return printer(node)

	def _pointer_type(self, node: Node) -> str:
		return "*" + self.type_text(named_children(node)[0])

	def _slice_type(self, node: Node) -> str:
		return "[]" + self.type_text(node.child_by_field_name("element"))

	def _array_type(self, node: Node) -> str:
		length = self.text(node.child_by_field_name("length"))
		return f"[{length}]" + self.type_text(node.child_by_field_name("element"))

	def _implicit_length_array_type(self, node: Node) -> str:
		return "[...]" + self.type_text(node.child_by_field_name("element"))

	def _map_type(self, node: Node) -> str:
		key = self.type_text(node.child_by_field_name("key"))
		return f"map[{key}]" + self.type_text(node.child_by_field_name("value"))

	def _channel_type(self, node: Node) -> str:
		tokens = [c.type for c in node.children if not c.is_named]
		if self._leading_token(node) == "<-":
			prefix = "<-chan "
		elif "<-" in tokens:
			prefix = "chan<- "
		else:
			prefix = "chan "
		value = node.child_by_field_name("value")
		if prefix == "chan " and value.type == "channel_type" and self._leading_token(value) == "<-":
			# <- binds to the leftmost chan: chan<- chan T
			return "chan<- chan " + self.type_text(value.child_by_field_name("value"))
		return prefix + self.type_text(value)

	def _leading_token(self, node: Node) -> str:
		tokens = [c.type for c in node.children if not c.is_named]
		return tokens[0] if tokens else ""

	def _function_type(self, node: Node) -> str:
		return "func" + format_signature(self.signature(node))

	def _qualified_type(self, node: Node) -> str:
		package = self.text(node.child_by_field_name("package"))
		return f"{package}." + self.text(node.child_by_field_name("name"))

	def _generic_type(self, node: Node) -> str:
		base = self.type_text(node.child_by_field_name("type"))
		arguments = node.child_by_field_name("type_arguments")
		if arguments is None:
			return base
		return base + "[" + ", ".join(self.type_text(c) for c in named_children(arguments)) + "]"

	def _parenthesized_type(self, node: Node) -> str:
		return "(" + self.type_text(named_children(node)[0]) + ")"

	# -- signatures ---------------------------------------------------------

	def params(self, node: Optional[Node]) -> List[Param]:
		"""Parameters of a ``parameter_list`` node, grouped as declared."""
		if node is None:
			return []
		params: List[Param] = []
		for child in named_children(node):
			if child.type not in ("parameter_declaration", "variadic_parameter_declaration"):
				continue
			names = [self.text(n) for n in child.children_by_field_name("name")]
			type_text = self.type_text(child.child_by_field_name("type"))
			if child.type == "variadic_parameter_declaration":
				type_text = "..." + type_text
			params.append(Param(names=names, type=type_text))
		return params

	def type_params(self, node: Optional[Node]) -> str:
		if node is None:
			return ""
		return "[" + ", ".join(self.text(c) for c in named_children(node)) + "]"

	def signature(self, node: Node) -> Signature:
		"""Signature of a function/method declaration or a function type."""
		result = node.child_by_field_name("result")
		if result is None:
			results: List[Param] = []
		elif result.type == "parameter_list":
			results = self.params(result)
		else:
			results = [Param(type=self.type_text(result))]
		return Signature(
			type_params=self.type_params(node.child_by_field_name("type_parameters")),
			params=self.params(node.child_by_field_name("parameters")),
			results=results,
		)
