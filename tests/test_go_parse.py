from textwrap import dedent

import pytest

from gosummarize.errors import ParseError
from gosummarize.go_parse import parse_go_file, parse_go_source
from gosummarize.model import FuncDecl, TypeDecl, ValueDecl
from gosummarize.printer import format_signature


def _parse(code):
	return parse_go_source("m.go", dedent(code).lstrip().encode("utf-8"))


def _signature_line(decl):
	return f"func {decl.name}{format_signature(decl.signature)}"


def test_parse_declarations_in_order():
	facts = _parse(
		"""
		package demo

		import "fmt"

		type A int

		const B = 2

		var c = fmt.Sprint(1)

		func D() {}

		func (a A) E() {}
		"""
	)
	assert facts.package == "demo"
	kinds = [(d.kind, getattr(d, "name", None) or d.names[0]) for d in facts.declarations]
	assert kinds == [("type", "A"), ("const", "B"), ("var", "c"), ("func", "D"), ("func", "E")]
	assert facts.declarations[4].receiver.name == "a"
	assert facts.declarations[4].receiver.type == "A"
	assert facts.declarations[0].line == 5


def test_signatures_are_canonical():
	facts = _parse(
		"""
		package demo

		func Pipe(in <-chan int, out chan<- string, done chan struct{}) (n int, err error) { return }

		func Apply[T any](xs []T, f func(T) T) []T { return xs }

		func Fixed(a [4]byte, b map[string][]*bytes.Buffer) {}

		func Spaced( a int,b  string )( int ,error ) { return 0, nil }

		func Chans(ch chan<- chan int, in <-chan <-chan int) {}
		"""
	)
	lines = [_signature_line(d) for d in facts.declarations]
	assert lines == [
		"func Pipe(in <-chan int, out chan<- string, done chan struct{}) (n int, err error)",
		"func Apply[T any](xs []T, f func(T) T) []T",
		"func Fixed(a [4]byte, b map[string][]*bytes.Buffer)",
		"func Spaced(a int, b string) (int, error)",
		"func Chans(ch chan<- chan int, in <-chan <-chan int)",
	]


def test_struct_fields_and_docs():
	facts = _parse(
		"""
		package demo

		type Outer struct {
			// Count is documented.
			Count int `json:"count"`
			Inner struct {
				X int
			}
			*Embedded
			a, B string
		}
		"""
	)
	outer = facts.declarations[0]
	assert isinstance(outer, TypeDecl)
	names = [f.names for f in outer.fields]
	assert names == [["Count"], ["Inner"], [], ["a", "B"]]
	assert outer.fields[0].doc == "Count is documented."
	assert outer.fields[0].type == "int"
	assert outer.fields[1].type == "struct {\n\tX int\n}"
	assert outer.fields[2].type == "*Embedded"
	assert outer.fields[3].type == "string"


def test_interface_definition_drops_comments():
	facts = _parse(
		"""
		package demo

		// Reader reads.
		type Reader interface {
			// Read fills p.
			Read(p []byte) (int, error) // trailing
			Close() error
		}
		"""
	)
	reader = facts.declarations[0]
	assert reader.fields is None
	assert reader.doc == "Reader reads."
	assert reader.definition == "interface {\n\tRead(p []byte) (int, error)\n\tClose() error\n}"


def test_generic_type_and_alias():
	facts = _parse(
		"""
		package demo

		type List[T any] struct {
			Items []T
		}

		type Name = string
		"""
	)
	generic, alias = facts.declarations
	assert generic.type_params == "[T any]"
	assert generic.fields[0].type == "[]T"
	assert alias.alias
	assert alias.definition == "string"


def test_value_specs():
	facts = _parse(
		"""
		package demo

		// Group doc.
		const (
			// Spec doc is not used.
			X = 1
			y = 2
			Z
		)

		var P, Q int = 1, 2
		"""
	)
	group = facts.declarations[:3]
	assert all(isinstance(d, ValueDecl) and d.kind == "const" for d in group)
	assert [d.names for d in group] == [["X"], ["y"], ["Z"]]
	assert [d.values for d in group] == [["1"], ["2"], []]
	assert all(d.doc == "Group doc." for d in group)
	pq = facts.declarations[3]
	assert pq.kind == "var"
	assert pq.names == ["P", "Q"]
	assert pq.type == "int"
	assert pq.values == ["1", "2"]


def test_doc_comment_attachment():
	facts = _parse(
		"""
		package demo

		// Detached comment.

		// F does things.
		//go:noinline
		func F() {}

		var a = 1 // about a
		func G() {}

		/* H is documented
		   with a block comment. */
		func H() {}
		"""
	)
	f, _, g, h = facts.declarations
	assert isinstance(f, FuncDecl)
	assert f.doc == "F does things."
	assert g.doc == ""
	assert h.doc.startswith("H is documented")
	assert "with a block comment." in h.doc


def test_unbalanced_braces_raise():
	with pytest.raises(ParseError) as excinfo:
		_parse(
			"""
			package demo

			func Broken() {
			"""
		)
	assert str(excinfo.value).startswith("error parsing m.go:")


def test_top_level_statements_raise():
	for statement in ["x := 1", "F()"]:
		with pytest.raises(ParseError, match="expected declaration"):
			_parse(f"package demo\n\n{statement}\n\nfunc F() {{}}\n")


def test_missing_package_clause():
	with pytest.raises(ParseError, match="expected 'package'"):
		_parse("func F() {}\n")


def test_invalid_utf8():
	with pytest.raises(ParseError, match="UTF-8"):
		parse_go_source("m.go", b"package demo\n\nvar X = \"\xff\"\n")


def test_unreadable_file(tmp_path):
	with pytest.raises(ParseError):
		parse_go_file(str(tmp_path / "missing.go"))
