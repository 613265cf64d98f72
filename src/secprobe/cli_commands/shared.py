"""Shared CLI app objects and helpers."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from secprobe.config import load_settings

app = typer.Typer(
    name="secprobe",
    help="Port scanning and API endpoint security testing",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through rich; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger("secprobe")
    root.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(
            RichHandler(console=err_console, show_path=False, rich_tracebacks=verbose)
        )
    # httpx logs every request at INFO; keep it quiet unless verbose.
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and SECPROBE_VERBOSE."""
    effective = verbose if isinstance(verbose, bool) else False
    if effective:
        return True
    return load_settings().verbose


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Port scanning and API endpoint security testing."""
    configure_logging(normalize_verbose(verbose))
