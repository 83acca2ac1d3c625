"""Configuration for the splint analyzer.

Default thresholds, the Go node type mappings used to lower tree-sitter
trees in syntax.py, and the immutable per-run AnalysisConfig value.
"""

from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a run configuration cannot be used for analysis."""


# ---------------------------------------------------------------------------
# Thresholds (a finding is reported only when a value strictly exceeds one)
# ---------------------------------------------------------------------------

DEFAULT_THRESHOLDS = {
    "statement": 30,
    "param": 5,
    "result": 5,
    "if_chain": 2,
}

TEST_FILE_SUFFIX = "_test.go"

SKIP_DIRS = {"vendor", "testdata"}


# ---------------------------------------------------------------------------
# Node type mappings
# ---------------------------------------------------------------------------

GO_CONFIG = {
    "grammar_module": "tree_sitter_go",
    "language_func": "language",
    "file_extensions": {".go"},
    "function_types": {"function_declaration", "method_declaration"},
    "conditional_type": "if_statement",
    "parameter_node": "parameters",
    "result_node": "result",
    "field_types": {
        "parameter_declaration",
        "variadic_parameter_declaration",
    },
    "statement_types": {
        "assignment_statement",
        "break_statement",
        "communication_case",
        "const_declaration",
        "continue_statement",
        "dec_statement",
        "default_case",
        "defer_statement",
        "empty_labeled_statement",
        "empty_statement",
        "expression_case",
        "expression_statement",
        "expression_switch_statement",
        "fallthrough_statement",
        "for_statement",
        "go_statement",
        "goto_statement",
        "if_statement",
        "inc_statement",
        "labeled_statement",
        "receive_statement",
        "return_statement",
        "select_statement",
        "send_statement",
        "short_var_declaration",
        "type_case",
        "type_declaration",
        "type_switch_statement",
        "var_declaration",
    },
}


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds and flags for one run. Never changes once built."""

    statement: int = DEFAULT_THRESHOLDS["statement"]
    param: int = DEFAULT_THRESHOLDS["param"]
    result: int = DEFAULT_THRESHOLDS["result"]
    if_chain: int = DEFAULT_THRESHOLDS["if_chain"]
    ignore_tests: bool = False
    output_json: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        for name in DEFAULT_THRESHOLDS:
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} threshold must be >= 0, got {value}")
