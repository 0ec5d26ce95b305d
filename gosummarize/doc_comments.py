"""Doc-comment attachment and text extraction.

A comment group is a run of comments with no blank line between them. The
group ending on the line right before a declaration is that declaration's
doc comment, unless it starts on the same line as the previous token (then
it is a trailing line comment of whatever came before).
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from tree_sitter import Node

# Tool directives such as //go:generate or //line are not documentation.
_DIRECTIVE = re.compile(r"^(line |extern |export |[a-z0-9]+:[a-z0-9])")


def lead_comments(siblings: Sequence[Node], index: int, floor_row: Optional[int] = None) -> List[Node]:
	"""Return the doc comment group attached to ``siblings[index]``.

	``siblings`` are the named children of the enclosing node, comments
	included. ``floor_row`` is the row of the opening token when the target
	may be the first element inside brackets.
	"""
	target_row = siblings[index].start_point[0]
	start = index
	while start > 0 and siblings[start - 1].type == "comment":
		start -= 1
	prev_row = siblings[start - 1].end_point[0] if start > 0 else floor_row
	candidates = [c for c in siblings[start:index] if c.start_point[0] != prev_row]

	group: List[Node] = []
	for comment in reversed(candidates):
		if not group:
			if comment.end_point[0] + 1 != target_row:
				return []
		elif comment.end_point[0] + 1 < group[0].start_point[0]:
			break
		group.insert(0, comment)
	return group


def comment_text(comments: Sequence[Node], source: bytes) -> str:
	"""Return the text of a comment group with comment markers removed."""
	lines: List[str] = []
	for comment in comments:
		raw = source[comment.start_byte:comment.end_byte].decode("utf-8")
		if raw.startswith("//"):
			body = raw[2:]
			if _DIRECTIVE.match(body):
				continue
			if body.startswith(" "):
				body = body[1:]
			lines.append(body)
		else:
			lines.extend(raw[2:-2].split("\n"))

	text: List[str] = []
	for line in lines:
		line = line.rstrip()
		if not line and (not text or not text[-1]):
			continue
		text.append(line)
	while text and not text[-1]:
		text.pop()
	return "\n".join(text)


def doc_for(siblings: Sequence[Node], index: int, source: bytes, floor_row: Optional[int] = None) -> str:
	return comment_text(lead_comments(siblings, index, floor_row), source)
