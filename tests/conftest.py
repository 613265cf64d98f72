"""Test configuration and fixtures for SecProbe."""

import asyncio
import socket
import tempfile
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest

from secprobe.config import ENV_KEYS
from secprobe.modules.vulntest import ScanSession
from secprobe.modules.vulntest.phases import PhaseContext
from secprobe.tools.http import HTTPClient


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Keep real env vars, ~/.secprobe and cwd project files out of tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    home = temp_dir / "home"
    home.mkdir()
    workdir = temp_dir / "work"
    workdir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    return home


async def no_sleep(_seconds: float) -> None:
    """Drop-in for asyncio.sleep that returns immediately."""


@pytest.fixture
def sleep_calls() -> list[float]:
    return []


@pytest.fixture
def recording_sleep(sleep_calls: list[float]):
    async def _sleep(seconds: float) -> None:
        sleep_calls.append(seconds)

    return _sleep


@pytest.fixture
async def phase_context() -> AsyncGenerator:
    """Factory building a PhaseContext over a live (respx-mockable) client."""
    async with HTTPClient() as client:

        def _make(url: str = "https://api.example.com/users", method: str = "GET"):
            return PhaseContext(
                client=client,
                session=ScanSession(url=url, method=method),
                sleep=no_sleep,
            )

        yield _make


@pytest.fixture
async def tcp_listener() -> AsyncGenerator[int, None]:
    """Start a loopback TCP server and yield its port."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield port
    finally:
        server.close()
        await server.wait_closed()


@pytest.fixture
def closed_port() -> int:
    """Return a loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
