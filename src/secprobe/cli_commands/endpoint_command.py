"""API endpoint testing CLI commands."""

from datetime import datetime
from pathlib import Path

import typer

from secprobe.errors import MalformedInputError
from secprobe.modules.report import (
    build_collection_report,
    build_report,
    default_report_path,
    print_session,
    write_json,
)
from secprobe.modules.vulntest import Phase, load_collection

from .deps import cli_module
from .shared import app, console, fail


def _phase_progress(phase: Phase) -> None:
    console.print(f"[cyan]●[/] Testing {phase.title}...")


@app.command("test-endpoint")
def test_endpoint(
    url: str = typer.Argument(..., help="Endpoint URL, e.g. https://api.example.com/users"),
    method: str = typer.Argument("GET", help="HTTP method"),
    timeout: float | None = typer.Option(
        None, "--timeout", "-t", help="Per-request timeout in seconds"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write a JSON report"),
    save: bool = typer.Option(
        False, "--save", "-s", help="Write a JSON report with a timestamped file name"
    ),
) -> None:
    """Run the security test phases against one API endpoint."""
    cli = cli_module()
    settings = cli.load_settings()
    if timeout and timeout > 0:
        settings.http_timeout = timeout
    pipeline = cli.VulnTestPipeline.from_settings(settings)

    console.print("\n[bold cyan]API Endpoint Security Test[/bold cyan]")
    console.print(f"URL: {url}")
    console.print(f"Method: {method.upper()}")
    console.print(f"[dim]Started: {datetime.now():%Y-%m-%d %H:%M:%S}[/dim]\n")

    try:
        session = cli.safe_async_run(pipeline.test_endpoint(url, method, _phase_progress))
    except MalformedInputError as exc:
        fail(str(exc))

    print_session(console, session)

    if output or save:
        path = write_json(build_report(session), output or default_report_path())
        console.print(f"[green]Report exported to:[/green] {path}")


@app.command("test-collection")
def test_collection(
    file: Path = typer.Argument(..., help="JSON collection file"),
    delay: float | None = typer.Option(
        None, "--delay", "-d", help="Pause between endpoints in seconds"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write a JSON report"),
    save: bool = typer.Option(
        False, "--save", "-s", help="Write a JSON report with a timestamped file name"
    ),
) -> None:
    """Test every endpoint listed in a collection file."""
    cli = cli_module()
    settings = cli.load_settings()
    pipeline = cli.VulnTestPipeline.from_settings(settings)

    try:
        collection = load_collection(file)
    except MalformedInputError as exc:
        fail(str(exc))

    console.print(f"\n[bold cyan]Testing API Collection:[/bold cyan] {collection.name}")
    console.print(f"Endpoints: {len(collection.endpoints)}\n")

    effective_delay = delay if delay is not None and delay >= 0 else settings.collection_delay
    runs = cli.safe_async_run(
        pipeline.run_collection(collection, delay=effective_delay, progress=_phase_progress)
    )

    sessions = []
    for run in runs:
        if run.session is None:
            console.print(
                f"[red]✗[/] {run.endpoint.method} {run.endpoint.url or '(missing url)'}: "
                f"{run.error}"
            )
            continue
        sessions.append(run.session)
        print_session(console, run.session)

    if output or save:
        path = write_json(
            build_collection_report(collection.name, sessions),
            output or default_report_path("api-collection-report"),
        )
        console.print(f"[green]Report exported to:[/green] {path}")
