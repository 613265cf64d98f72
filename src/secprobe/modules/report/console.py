"""Rich console rendering for scan and test results."""

from rich.console import Console
from rich.table import Table

from secprobe.modules.portscan import PortScanReport
from secprobe.modules.vulntest import ScanSession, Severity, by_severity, security_score

SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}


def score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def print_port_report(console: Console, report: PortScanReport) -> None:
    """Print open ports, summary and security notes for a port scan."""
    if report.open_ports:
        title = f"Open ports on {report.host}"
        table = Table(title=title, show_lines=False, min_width=len(title) + 4)
        table.add_column("Port", style="bold", justify="right")
        table.add_column("Service", style="green")
        for item in report.open_ports:
            table.add_row(str(item.port), item.service)
        console.print(table)
    else:
        console.print("[yellow]○[/] No open ports found")

    console.print("\n[bold]Scan Summary[/bold]")
    console.print(f"  Total ports scanned: {report.total_scanned}")
    console.print(f"  Open ports: {len(report.open_ports)}")
    console.print(f"  Duration: {report.duration_ms / 1000:.2f}s")
    if report.cancelled:
        console.print("  [yellow]Scan was cancelled before completion[/yellow]")

    if report.security_notes:
        console.print("\n[bold yellow]Security Notes:[/bold yellow]")
        for note in report.security_notes:
            console.print(f"  [red]●[/] Port {note.port} ({note.service}) - {note.message}")


def print_session(console: Console, session: ScanSession) -> None:
    """Print findings bucketed by severity, followed by the summary and score."""
    console.print(f"\n[bold]Test Results[/bold] [dim]{session.method} {session.url}[/dim]")

    buckets = by_severity(session)
    for severity, findings in buckets.items():
        if not findings:
            continue
        style = SEVERITY_STYLES[severity]
        console.print(f"\n[{style}]{severity.value.upper()} Vulnerabilities:[/{style}]")
        for finding in findings:
            console.print(f"  • [bold]{finding.kind}[/bold]")
            console.print(f"    Issue: {finding.detail}")
            console.print(f"    Fix: {finding.remediation}")

    if not session.findings:
        console.print("\n[green]No vulnerabilities detected![/green]")

    if session.errors:
        console.print("\n[yellow]Probe errors:[/yellow]")
        for error in session.errors:
            console.print(f"  [dim]{error.phase}:[/dim] {error.message}")

    console.print("\n[bold]Summary:[/bold]")
    for severity, findings in buckets.items():
        console.print(f"  {severity.value.capitalize()}: {len(findings)}")
    console.print(f"  Total Tests: {len(session.results)}")

    score = security_score(session)
    style = score_style(score)
    console.print(f"\n[bold]Security Score:[/bold] [{style}]{score}/100[/{style}]\n")
