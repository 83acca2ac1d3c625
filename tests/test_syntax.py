"""Tests for parsing Go with tree-sitter and lowering it to the node model."""

import pytest

from splint.syntax import (
    Block,
    Conditional,
    FunctionDecl,
    ParseError,
    Statement,
    lower_source_file,
    parse_source,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _functions(source):
    """Parse Go source and return its lowered function declarations."""
    return lower_source_file(parse_source("package main\n\n" + source))


def _only_function(source):
    funcs = _functions(source)
    assert len(funcs) == 1, f"expected one function, got {len(funcs)}"
    return funcs[0]


# ---------------------------------------------------------------------------
# parse_source
# ---------------------------------------------------------------------------


def test_parse_accepts_str_and_bytes():
    source = "package main\n\nfunc main() {}\n"
    assert parse_source(source).type == "source_file"
    assert parse_source(source.encode("utf8")).type == "source_file"


def test_parse_error_raises_with_position():
    with pytest.raises(ParseError) as info:
        parse_source("package main\n\nfunc broken( {\n")
    assert info.value.line >= 3


def test_empty_source_parses_to_no_functions():
    assert lower_source_file(parse_source("")) == []


# ---------------------------------------------------------------------------
# Function declarations
# ---------------------------------------------------------------------------


def test_function_name_and_position():
    func = _only_function("func hello() {}\n")
    assert isinstance(func, FunctionDecl)
    assert func.name == "hello"
    assert func.line == 3
    assert func.column == 1


def test_method_is_a_function_and_receiver_is_not_a_param():
    func = _only_function("func (s *Server) Handle(a, b int, c string) (int, error) {\n\treturn 0, nil\n}\n")
    assert func.name == "Handle"
    assert func.param_count == 3
    assert func.result_count == 2


def test_grouped_names_count_once_each():
    func = _only_function("func f(a, b, c, d, e, g int) {}\n")
    assert func.param_count == 6


def test_unnamed_and_variadic_params():
    assert _only_function("func f(int, string) {}\n").param_count == 2
    assert _only_function("func f(format string, args ...any) {}\n").param_count == 2


def test_result_shapes():
    assert _only_function("func f() {}\n").result_count == 0
    assert _only_function("func f() error { return nil }\n").result_count == 1
    assert _only_function("func f() (int, string, error) { return 0, \"\", nil }\n").result_count == 3
    assert _only_function("func f() (a, b int) { return }\n").result_count == 2


def test_type_parameters_are_not_params():
    func = _only_function("func Map[T any, U any](xs []T, fn func(T) U) []U { return nil }\n")
    assert func.param_count == 2
    assert func.result_count == 1


def test_declaration_without_body():
    func = _only_function("func nanotime() int64\n")
    assert func.body is None
    assert func.result_count == 1


def test_only_top_level_functions_in_source_order():
    source = (
        "type T struct{}\n"
        "var x = 1\n"
        "func b() {}\n"
        "func (t T) a() {}\n"
        "func c() {}\n"
    )
    assert [f.name for f in _functions(source)] == ["b", "a", "c"]


# ---------------------------------------------------------------------------
# Statements and blocks
# ---------------------------------------------------------------------------


def test_body_is_block_of_statements():
    func = _only_function("func f() {\n\tx := 1\n\tprintln(x)\n\treturn\n}\n")
    assert isinstance(func.body, Block)
    kinds = [s.kind for s in func.body.statements]
    assert kinds == ["short_var_declaration", "expression_statement", "return_statement"]


def test_comments_are_not_statements():
    func = _only_function("func f() {\n\t// nothing here\n}\n")
    assert func.body.statements == ()


def test_closure_statements_hang_off_enclosing_statement():
    func = _only_function("func f() {\n\tgo func() {\n\t\tprintln(1)\n\t}()\n}\n")
    (stmt,) = func.body.statements
    assert isinstance(stmt, Statement)
    assert stmt.kind == "go_statement"
    assert [c.kind for c in stmt.children] == ["expression_statement"]


def test_switch_cases_are_statements():
    func = _only_function(
        "func f(x int) {\n"
        "\tswitch x {\n"
        "\tcase 1:\n"
        "\t\tprintln(1)\n"
        "\tdefault:\n"
        "\t\tprintln(2)\n"
        "\t}\n"
        "}\n"
    )
    (switch,) = func.body.statements
    assert [c.kind for c in switch.children] == ["expression_case", "default_case"]


# ---------------------------------------------------------------------------
# Conditionals
# ---------------------------------------------------------------------------


def test_bare_if_has_no_alternative():
    func = _only_function("func f(x bool) {\n\tif x {\n\t\tprintln(1)\n\t}\n}\n")
    (cond,) = func.body.statements
    assert isinstance(cond, Conditional)
    assert cond.alternative is None
    assert len(cond.body.statements) == 1
    assert cond.line == 4


def test_else_if_chain_links_conditionals():
    func = _only_function(
        "func f(a, b bool) {\n"
        "\tif a {\n"
        "\t} else if b {\n"
        "\t} else {\n"
        "\t\tprintln(1)\n"
        "\t}\n"
        "}\n"
    )
    (cond,) = func.body.statements
    assert isinstance(cond.alternative, Conditional)
    assert isinstance(cond.alternative.alternative, Block)
    assert len(cond.alternative.alternative.statements) == 1


def test_if_initializer_is_a_header_statement():
    func = _only_function(
        "func f() error {\n"
        "\tif err := g(); err != nil {\n"
        "\t\treturn err\n"
        "\t}\n"
        "\treturn nil\n"
        "}\n"
    )
    cond = func.body.statements[0]
    assert [s.kind for s in cond.header] == ["short_var_declaration"]
