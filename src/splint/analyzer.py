"""File analysis and run aggregation.

analyze_source() runs every function check over one file's source and
returns a FileResult. run_analysis() drives a list of files through it in
order and collects the findings into a single Summary.
"""

import os
from dataclasses import dataclass, field

from splint.checks import examine_function
from splint.config import GO_CONFIG, SKIP_DIRS, TEST_FILE_SUFFIX, AnalysisConfig
from splint.summary import Offender, Summary
from splint.syntax import ParseError, lower_source_file, parse_source
from splint.utils import log


@dataclass
class FileResult:
    """Offenders found in one file, or the reason the file was skipped."""

    path: str
    offenders: list[Offender] = field(default_factory=list)
    error: str | None = None

    def announced(self):
        """Yield (first_in_file, offender) pairs.

        first_in_file is True only for the file's first offender, so text
        output can print the filename header once.
        """
        for index, offender in enumerate(self.offenders):
            yield index == 0, offender


# ---------------------------------------------------------------------------
# File selection
# ---------------------------------------------------------------------------


def is_test_file(path: str) -> bool:
    return os.path.basename(path).endswith(TEST_FILE_SUFFIX)


def collect_files(paths: list[str], ignore_tests: bool = False) -> list[str]:
    """Expand command-line paths into the ordered list of files to analyze.

    Directories are walked for Go files in sorted order. Plain files and
    paths that do not exist are kept as given.
    """
    extensions = GO_CONFIG["file_extensions"]
    files = []
    for path in paths:
        if not os.path.isdir(path):
            files.append(path)
            continue
        found = []
        for root, dirs, names in os.walk(path):
            dirs[:] = [d for d in dirs if d not in SKIP_DIRS and not d.startswith(".")]
            for name in names:
                if os.path.splitext(name)[1] in extensions:
                    found.append(os.path.join(root, name))
        files.extend(sorted(found))
    if ignore_tests:
        files = [f for f in files if not is_test_file(f)]
    return files


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


def analyze_source(source: bytes | str, path: str, config: AnalysisConfig) -> FileResult:
    """Parse one file's source and run every check on its functions."""
    try:
        root = parse_source(source)
    except ParseError as exc:
        return FileResult(path, error=str(exc))

    offenders: list[Offender] = []
    try:
        for func in lower_source_file(root):
            offenders.extend(examine_function(func, config, path))
    except RecursionError:
        return FileResult(path, error="source nested too deeply to analyze")
    return FileResult(path, offenders)


def analyze_file(path: str, config: AnalysisConfig) -> FileResult:
    """Read and analyze one file. Unreadable files become error results."""
    try:
        with open(path, "rb") as f:
            source = f.read()
    except OSError as exc:
        return FileResult(path, error=exc.strerror or str(exc))
    return analyze_source(source, path, config)


def run_analysis(paths: list[str], config: AnalysisConfig, on_result=None) -> Summary:
    """Analyze files one at a time, in order, into a single Summary.

    A file that cannot be read or parsed is reported and skipped; it never
    stops the run. on_result, if given, is called with each FileResult as
    soon as the file is done.
    """
    summary = Summary()
    for path in paths:
        if config.verbose:
            log(f"analyzing {path}", style="dim")
        result = analyze_file(path, config)
        if result.error is not None:
            log(f"error parsing {path}: {result.error}", style="red")
        summary.extend(result.offenders)
        if on_result is not None:
            on_result(result)
    return summary
