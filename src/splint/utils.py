"""Console output helpers: report output on stdout, diagnostics on stderr."""

from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def log(message: str, style: str = "") -> None:
    """Write a diagnostic message to stderr with an optional rich style."""
    if style:
        err_console.print(message, style=style, markup=False, soft_wrap=True)
    else:
        err_console.print(message, markup=False, soft_wrap=True)
