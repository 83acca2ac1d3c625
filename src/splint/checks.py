"""Per-function complexity checks.

Pure measurement functions operate on the node model from syntax.py.
Each check_* function takes a FunctionDecl and returns the Offenders it
produces; examine_function() runs them all in report order.
"""

from splint.config import AnalysisConfig
from splint.summary import (
    EMPTY_IF_BODY,
    IF_CHAIN,
    PARAM,
    RESULT,
    STATEMENT,
    Offender,
)
from splint.syntax import Block, Conditional, FunctionDecl, Statement


# ---------------------------------------------------------------------------
# Traversal helpers
# ---------------------------------------------------------------------------


def children_of(node) -> tuple:
    """Direct children of a node, in source order. Blocks stay as blocks."""
    if node is None:
        return ()
    if isinstance(node, FunctionDecl):
        return (node.body,) if node.body is not None else ()
    if isinstance(node, Block):
        return node.statements
    if isinstance(node, Statement):
        return node.children
    if isinstance(node, Conditional):
        tail = tuple(n for n in (node.body, node.alternative) if n is not None)
        return node.header + tail
    raise TypeError(f"unexpected node kind: {type(node).__name__}")


def _statements_of(block: Block | None) -> tuple:
    return block.statements if block is not None else ()


# ---------------------------------------------------------------------------
# Pure measurement functions
# ---------------------------------------------------------------------------


def count_statements(node) -> int:
    """Count every statement in a subtree, the subtree root included.

    Blocks and function declarations are containers and add nothing of
    their own.
    """
    total = 0
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        if isinstance(current, (Statement, Conditional)):
            total += 1
        pending.extend(children_of(current))
    return total


def measure_chain_length(conditional: Conditional) -> int:
    """Number of else links hanging off a conditional.

    An ``else if`` adds one and continues; a final ``else`` block adds one
    and stops; no else at all is 0.
    """
    length = 0
    alternative = conditional.alternative
    while alternative is not None:
        length += 1
        if not isinstance(alternative, Conditional):
            break
        alternative = alternative.alternative
    return length


def iter_conditionals(func: FunctionDecl):
    """Yield every conditional in a function, preorder, else-if links included."""
    pending = list(reversed(children_of(func)))
    while pending:
        node = pending.pop()
        if isinstance(node, Conditional):
            yield node
        pending.extend(reversed(children_of(node)))


def _chain_members(conditional: Conditional) -> list:
    """Nodes inside a whole if/else-if chain, minus the chain links themselves."""
    members = []
    link = conditional
    while link is not None:
        members.extend(link.header)
        if link.body is not None:
            members.append(link.body)
        alternative = link.alternative
        if isinstance(alternative, Conditional):
            link = alternative
        else:
            if alternative is not None:
                members.append(alternative)
            link = None
    return members


def iter_topmost_conditionals(func: FunctionDecl):
    """Yield each conditional that starts a chain, exactly once.

    Else-if links are consumed as part of their chain and never enqueued
    as starting points; conditionals nested inside any link's body are.
    """
    pending = list(reversed(children_of(func)))
    while pending:
        node = pending.pop()
        if isinstance(node, Conditional):
            yield node
            pending.extend(reversed(_chain_members(node)))
        else:
            pending.extend(reversed(children_of(node)))


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def _offender(filename: str, func: FunctionDecl, node, count: int, category: str) -> Offender:
    return Offender(
        filename=filename,
        function=func.name,
        line=node.line,
        column=node.column,
        count=count,
        category=category,
    )


def check_function_length(func: FunctionDecl, threshold: int, filename: str = "") -> list[Offender]:
    count = count_statements(func.body)
    if count <= threshold:
        return []
    return [_offender(filename, func, func, count, STATEMENT)]


def check_param_count(func: FunctionDecl, threshold: int, filename: str = "") -> list[Offender]:
    if func.param_count <= threshold:
        return []
    return [_offender(filename, func, func, func.param_count, PARAM)]


def check_result_count(func: FunctionDecl, threshold: int, filename: str = "") -> list[Offender]:
    if func.result_count <= threshold:
        return []
    return [_offender(filename, func, func, func.result_count, RESULT)]


def check_empty_if_bodies(func: FunctionDecl, filename: str = "") -> list[Offender]:
    """Report every if (or else if) whose body holds no statements."""
    return [
        _offender(filename, func, cond, 0, EMPTY_IF_BODY)
        for cond in iter_conditionals(func)
        if not _statements_of(cond.body)
    ]


def check_if_chains(func: FunctionDecl, threshold: int, filename: str = "") -> list[Offender]:
    offenders = []
    for cond in iter_topmost_conditionals(func):
        length = measure_chain_length(cond)
        if length > threshold:
            offenders.append(_offender(filename, func, cond, length, IF_CHAIN))
    return offenders


def examine_function(func: FunctionDecl, config: AnalysisConfig, filename: str = "") -> list[Offender]:
    """Run every check on one function, in report order."""
    return (
        check_function_length(func, config.statement, filename)
        + check_param_count(func, config.param, filename)
        + check_result_count(func, config.result, filename)
        + check_empty_if_bodies(func, filename)
        + check_if_chains(func, config.if_chain, filename)
    )
