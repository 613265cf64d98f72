"""Port scan CLI command."""

import asyncio
from datetime import datetime
from pathlib import Path

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from secprobe.errors import MalformedInputError
from secprobe.modules.portscan import OpenPort
from secprobe.modules.report import (
    build_port_report,
    default_report_path,
    print_port_report,
    write_json,
)
from secprobe.utils.async_utils import interrupt_handler

from .deps import cli_module
from .shared import app, console, fail


@app.command("scan-ports")
def scan_ports(
    host: str = typer.Argument("127.0.0.1", help="Host to scan"),
    start: int = typer.Argument(1, help="First port of the range"),
    end: int = typer.Argument(1024, help="Last port of the range (inclusive)"),
    timeout: float | None = typer.Option(
        None, "--timeout", "-t", help="Per-port connect timeout in seconds"
    ),
    concurrency: int | None = typer.Option(
        None, "--concurrency", "-c", help="Maximum simultaneous connection attempts"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write a JSON report"),
    save: bool = typer.Option(
        False, "--save", "-s", help="Write a JSON report with a timestamped file name"
    ),
) -> None:
    """Scan a contiguous TCP port range on one host."""
    cli = cli_module()
    settings = cli.load_settings()

    try:
        scanner = cli.PortScanner(
            timeout=timeout if timeout and timeout > 0 else settings.port_timeout,
            max_concurrency=concurrency if concurrency is not None else settings.max_concurrency,
            progress_every=settings.progress_every,
        )
    except MalformedInputError as exc:
        fail(str(exc))

    console.print("\n[bold cyan]Port Scan Report[/bold cyan]")
    console.print(f"Target: [bold]{host}[/bold]")
    console.print(f"Range: {start}-{end}")
    console.print(f"[dim]Started: {datetime.now():%Y-%m-%d %H:%M:%S}[/dim]\n")

    async def run_scan():
        cancel_event = asyncio.Event()
        total = max(0, end - start + 1)
        with Progress(
            TextColumn("[cyan]Scanning"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("ports", total=total)

            def on_progress(completed: int, _total: int) -> None:
                progress.update(task, completed=completed)

            def on_open(item: OpenPort) -> None:
                progress.console.print(f"[green]✓[/] Port {item.port} OPEN - {item.service}")

            with interrupt_handler(cancel_event.set):
                report = await scanner.scan(
                    host,
                    start,
                    end,
                    progress=on_progress,
                    on_open=on_open,
                    cancel_event=cancel_event,
                )
            progress.update(task, completed=total)
        return report

    try:
        report = cli.safe_async_run(run_scan())
    except MalformedInputError as exc:
        fail(str(exc))

    print_port_report(console, report)

    if output or save:
        path = write_json(
            build_port_report(report), output or default_report_path("port-scan-report")
        )
        console.print(f"\n[green]Report exported to:[/green] {path}")
