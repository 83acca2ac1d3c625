"""CLI app definition."""

from typing import Annotated

import typer

from splint.analyzer import collect_files, run_analysis
from splint.config import DEFAULT_THRESHOLDS, AnalysisConfig, ConfigError
from splint.report import print_file_result, print_totals, render_json
from splint.utils import console, log
from splint.version import get_version


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


app = typer.Typer(
    help="Find Go functions that are too long or take or return too much.",
    add_completion=False,
)


@app.command(no_args_is_help=True)
def main(
    paths: Annotated[list[str], typer.Argument(help="Go files or directories to analyze.")],
    statements: Annotated[
        int, typer.Option("--statements", "-s", help="Function statement count threshold.")
    ] = DEFAULT_THRESHOLDS["statement"],
    params: Annotated[
        int, typer.Option("--params", "-p", help="Parameter list length threshold.")
    ] = DEFAULT_THRESHOLDS["param"],
    results: Annotated[
        int, typer.Option("--results", "-r", help="Result list length threshold.")
    ] = DEFAULT_THRESHOLDS["result"],
    if_chain: Annotated[
        int, typer.Option("--if-chain", "-i", help="If/else chain length threshold.")
    ] = DEFAULT_THRESHOLDS["if_chain"],
    ignore_tests: Annotated[
        bool, typer.Option("--ignore-tests", "-t", help="Skip *_test.go files.")
    ] = False,
    output_json: Annotated[
        bool, typer.Option("--json", "-j", help="Output results as JSON.")
    ] = False,
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit with status 1 when anything is reported.")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log each file as it is analyzed.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Analyze Go source files for functions that exceed complexity thresholds."""
    try:
        config = AnalysisConfig(
            statement=statements,
            param=params,
            result=results,
            if_chain=if_chain,
            ignore_tests=ignore_tests,
            output_json=output_json,
            verbose=verbose,
        )
    except ConfigError as exc:
        log(f"error: {exc}", style="red")
        raise typer.Exit(2)

    files = collect_files(paths, config.ignore_tests)
    on_result = None if config.output_json else print_file_result
    summary = run_analysis(files, config, on_result=on_result)

    if config.output_json:
        typer.echo(render_json(summary))
    else:
        print_totals(summary)

    if strict and summary.total > 0:
        raise typer.Exit(1)
