"""Offender records and the per-run Summary they are collected into."""

from dataclasses import asdict, dataclass, field

STATEMENT = "statement"
PARAM = "param"
RESULT = "result"
EMPTY_IF_BODY = "empty_if_body"
IF_CHAIN = "if_chain"

# All categories, in report order
CATEGORIES = [STATEMENT, PARAM, RESULT, EMPTY_IF_BODY, IF_CHAIN]

# category -> Summary counter attribute
COUNT_FIELDS = {
    STATEMENT: "num_above_statement_threshold",
    PARAM: "num_above_param_threshold",
    RESULT: "num_above_result_threshold",
    EMPTY_IF_BODY: "num_empty_if_body",
    IF_CHAIN: "num_above_if_chain_threshold",
}


@dataclass(frozen=True)
class Offender:
    """A single threshold or pattern violation."""

    filename: str
    function: str
    line: int
    column: int
    count: int
    category: str


@dataclass
class Summary:
    """All offenders of a run, one list per category.

    The num_* counters duplicate the list lengths so reports can read them
    directly. Use add() so that each counter stays equal to its list length.
    """

    statement: list[Offender] = field(default_factory=list)
    param: list[Offender] = field(default_factory=list)
    result: list[Offender] = field(default_factory=list)
    empty_if_body: list[Offender] = field(default_factory=list)
    if_chain: list[Offender] = field(default_factory=list)

    num_above_statement_threshold: int = 0
    num_above_param_threshold: int = 0
    num_above_result_threshold: int = 0
    num_empty_if_body: int = 0
    num_above_if_chain_threshold: int = 0

    def add(self, offender: Offender) -> None:
        if offender.category not in COUNT_FIELDS:
            raise ValueError(f"unknown offender category: {offender.category!r}")
        getattr(self, offender.category).append(offender)
        counter = COUNT_FIELDS[offender.category]
        setattr(self, counter, getattr(self, counter) + 1)

    def extend(self, offenders) -> None:
        for offender in offenders:
            self.add(offender)

    def merge(self, other: "Summary") -> None:
        """Append every offender of another summary, category by category."""
        for category in CATEGORIES:
            self.extend(getattr(other, category))

    def offenders(self, category: str) -> list[Offender]:
        return getattr(self, category)

    def count(self, category: str) -> int:
        return getattr(self, COUNT_FIELDS[category])

    @property
    def total(self) -> int:
        return sum(self.count(category) for category in CATEGORIES)

    def to_dict(self) -> dict:
        return asdict(self)
