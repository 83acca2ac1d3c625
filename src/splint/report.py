"""Text and JSON rendering of analysis results."""

import json

from splint.analyzer import FileResult
from splint.summary import (
    EMPTY_IF_BODY,
    IF_CHAIN,
    PARAM,
    RESULT,
    STATEMENT,
    Offender,
    Summary,
)
from splint.utils import console

TOTAL_LABELS = {
    STATEMENT: "Number of functions above statement threshold",
    PARAM: "Number of functions above param threshold",
    RESULT: "Number of functions above result threshold",
    EMPTY_IF_BODY: "Number of empty if bodies",
    IF_CHAIN: "Number of if/else chains above threshold",
}


def format_offender(offender: Offender) -> str:
    """One warning line, e.g. 'function Foo too long: 31'."""
    name = offender.function
    if offender.category == STATEMENT:
        return f"function {name} too long: {offender.count}"
    if offender.category == PARAM:
        return f"function {name} has too many params: {offender.count}"
    if offender.category == RESULT:
        return f"function {name} has too many results: {offender.count}"
    if offender.category == EMPTY_IF_BODY:
        return f"function {name} has an empty if body at line {offender.line}"
    if offender.category == IF_CHAIN:
        return f"function {name} has a long if/else chain at line {offender.line}: {offender.count}"
    raise ValueError(f"unknown offender category: {offender.category!r}")


def format_file_result(result: FileResult) -> list[str]:
    """Text lines for one file: a blank line and the path, then each warning."""
    lines = []
    for first, offender in result.announced():
        if first:
            lines.extend(["", result.path])
        lines.append(format_offender(offender))
    return lines


def format_totals(summary: Summary) -> list[str]:
    lines = [""]
    for category, label in TOTAL_LABELS.items():
        lines.append(f"{label}: {summary.count(category)}")
    return lines


def print_file_result(result: FileResult) -> None:
    for line in format_file_result(result):
        console.print(line, markup=False, soft_wrap=True)


def print_totals(summary: Summary) -> None:
    for line in format_totals(summary):
        console.print(line, markup=False, soft_wrap=True)


def render_json(summary: Summary) -> str:
    return json.dumps(summary.to_dict(), indent=2)
