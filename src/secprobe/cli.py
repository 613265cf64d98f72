"""SecProbe CLI - port scanning and API endpoint security testing."""

from secprobe.cli_commands import endpoint_command, scan_ports_command  # noqa: F401
from secprobe.cli_commands.shared import app, console
from secprobe.config import load_settings
from secprobe.modules.portscan import PortScanner
from secprobe.modules.vulntest import VulnTestPipeline
from secprobe.utils.async_utils import safe_async_run

__all__ = [
    "PortScanner",
    "VulnTestPipeline",
    "app",
    "console",
    "load_settings",
    "main",
    "safe_async_run",
]


@app.command()
def version() -> None:
    """Show the installed SecProbe version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("secprobe")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"SecProbe {current_version}")


def main():
    """Entry point for the CLI."""
    app()
