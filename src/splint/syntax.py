"""Read-only node model for Go source, built on tree-sitter.

The checks never see tree-sitter nodes. parse_source() turns source text
into a tree-sitter tree and lower_source_file() reduces it to a closed
set of node kinds:

    FunctionDecl  a top-level function or method declaration
    Block         a braced container of statements (not a statement itself)
    Statement     any other Go statement, with the statements nested in it
    Conditional   an if statement, with its else branch

Blocks, statement lists and expressions are transparent while lowering:
statements inside a function literal hang off the statement that holds
the literal.
"""

import importlib
from dataclasses import dataclass

from tree_sitter import Language, Parser

from splint.config import GO_CONFIG


class ParseError(Exception):
    """Raised when the front-end cannot produce a clean syntax tree."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


# ---------------------------------------------------------------------------
# Node model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Block:
    statements: tuple = ()
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Statement:
    kind: str
    line: int
    column: int
    children: tuple = ()


@dataclass(frozen=True)
class Conditional:
    """An if statement.

    ``alternative`` is another Conditional for ``else if``, a Block for a
    final ``else``, or None. ``header`` holds the initializer statement and
    any statements found inside the condition expression.
    """

    line: int
    column: int
    body: Block | None = None
    alternative: "Conditional | Block | None" = None
    header: tuple = ()


@dataclass(frozen=True)
class FunctionDecl:
    name: str
    line: int
    column: int
    param_count: int = 0
    result_count: int = 0
    body: Block | None = None


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

_parser_cache: dict = {}


def _get_parser(config: dict) -> Parser:
    """Get or create a tree-sitter parser for a language config."""
    cache_key = (config["grammar_module"], config["language_func"])
    if cache_key not in _parser_cache:
        mod = importlib.import_module(config["grammar_module"])
        lang_func = getattr(mod, config["language_func"])
        _parser_cache[cache_key] = Parser(Language(lang_func()))
    return _parser_cache[cache_key]


def find_syntax_error(root):
    """Return the first ERROR or MISSING node in a tree, or None."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        suspects = [c for c in node.children if c.has_error or c.is_missing]
        stack.extend(reversed(suspects))
    return None


def parse_source(source: bytes | str, config: dict = GO_CONFIG):
    """Parse source code and return the root node of its syntax tree.

    Raises ParseError when tree-sitter had to recover from a syntax error.
    """
    if isinstance(source, str):
        source = source.encode("utf8")
    tree = _get_parser(config).parse(source)
    root = tree.root_node
    if not root.has_error:
        return root

    bad = find_syntax_error(root) or root
    line, column = _position(bad)
    if bad.is_missing:
        reason = f"missing {bad.type}"
    else:
        reason = "syntax error"
    raise ParseError(f"{line}:{column}: {reason}", line, column)


# ---------------------------------------------------------------------------
# Lowering
# ---------------------------------------------------------------------------


def _position(node) -> tuple[int, int]:
    """1-based (line, column) of a node's first byte."""
    return node.start_point[0] + 1, node.start_point[1] + 1


def _text(node) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf8", errors="replace")


def get_function_name(node) -> str:
    """Extract the declared name from a function or method node."""
    return _text(node.child_by_field_name("name")) or "<anonymous>"


def count_fields(field_list, config: dict = GO_CONFIG) -> int:
    """Count the fields of a parameter list the way Go does.

    Each declared name counts once; an unnamed field counts once.
    """
    if field_list is None:
        return 0
    total = 0
    for child in field_list.named_children:
        if child.type in config["field_types"]:
            total += max(1, len(child.children_by_field_name("name")))
    return total


def count_results(result, config: dict = GO_CONFIG) -> int:
    """Count declared results: a parenthesized list, a single bare type, or none."""
    if result is None:
        return 0
    if result.type == "parameter_list":
        return count_fields(result, config)
    return 1


def _statement_nodes_in(node, config: dict) -> list:
    """Statement nodes beneath node in source order, without entering them."""
    found = []
    pending = list(reversed(node.named_children))
    while pending:
        child = pending.pop()
        if child.type in config["statement_types"]:
            found.append(child)
        else:
            pending.extend(reversed(child.named_children))
    return found


def _statement_nodes_at(node, config: dict) -> list:
    """node itself if it is a statement, else the statement nodes beneath it."""
    if node.type in config["statement_types"]:
        return [node]
    return _statement_nodes_in(node, config)


def _parts(node, as_block: bool, config: dict) -> list:
    """(node, as_block) pairs that must be lowered before node, in order."""
    if as_block or node.type != config["conditional_type"]:
        return [(n, False) for n in _statement_nodes_in(node, config)]

    parts = []
    for field in ("initializer", "condition"):
        part = node.child_by_field_name(field)
        if part is not None:
            parts.extend((n, False) for n in _statement_nodes_at(part, config))
    consequence = node.child_by_field_name("consequence")
    if consequence is not None:
        parts.append((consequence, True))
    alternative = node.child_by_field_name("alternative")
    if alternative is not None:
        parts.append((alternative, alternative.type != config["conditional_type"]))
    return parts


def _build(node, as_block: bool, lowered: list, config: dict):
    line, column = _position(node)
    if as_block:
        return Block(tuple(lowered), line, column)
    if node.type != config["conditional_type"]:
        return Statement(node.type, line, column, tuple(lowered))

    alternative = None
    if node.child_by_field_name("alternative") is not None:
        alternative = lowered.pop()
    body = None
    if node.child_by_field_name("consequence") is not None:
        body = lowered.pop()
    return Conditional(line, column, body, alternative, tuple(lowered))


def _lower(top, as_block: bool, config: dict):
    """Lower a block or statement and everything beneath it.

    Works bottom-up from an explicit stack, so deeply nested expressions
    and long else-if chains do not hit the interpreter's recursion limit.
    """
    pending = [(top, as_block, None)]
    values = []
    while pending:
        node, block, parts = pending.pop()
        if parts is None:
            parts = _parts(node, block, config)
            pending.append((node, block, parts))
            pending.extend((n, b, None) for n, b in reversed(parts))
            continue
        split = len(values) - len(parts)
        lowered = values[split:]
        del values[split:]
        values.append(_build(node, block, lowered, config))
    return values[0]


def lower_block(node, config: dict = GO_CONFIG) -> Block:
    return _lower(node, True, config)


def lower_conditional(node, config: dict = GO_CONFIG) -> Conditional:
    return _lower(node, False, config)


def lower_statement(node, config: dict = GO_CONFIG):
    return _lower(node, False, config)


def lower_function(node, config: dict = GO_CONFIG) -> FunctionDecl:
    body = node.child_by_field_name("body")
    line, column = _position(node)
    return FunctionDecl(
        name=get_function_name(node),
        line=line,
        column=column,
        param_count=count_fields(node.child_by_field_name(config["parameter_node"]), config),
        result_count=count_results(node.child_by_field_name(config["result_node"]), config),
        body=lower_block(body, config) if body is not None else None,
    )


def lower_source_file(root, config: dict = GO_CONFIG) -> list[FunctionDecl]:
    """Lower the top-level function declarations of a file, in source order."""
    return [
        lower_function(child, config)
        for child in root.named_children
        if child.type in config["function_types"]
    ]
