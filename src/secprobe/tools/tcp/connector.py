"""TCP connect probe."""

import asyncio
import contextlib
from dataclasses import dataclass
from enum import Enum


class PortState(str, Enum):
    """Classification of a single TCP connect attempt."""

    OPEN = "open"
    CLOSED = "closed"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class PortTarget:
    """A host/port pair to connect to."""

    host: str
    port: int


@dataclass(frozen=True)
class PortOutcome:
    """Exactly one outcome per submitted PortTarget."""

    target: PortTarget
    state: PortState
    message: str = ""

    @property
    def is_open(self) -> bool:
        return self.state is PortState.OPEN


async def check_port(target: PortTarget, timeout: float = 1.0) -> PortOutcome:
    """Attempt a TCP connection and classify the result. Never raises."""
    writer: asyncio.StreamWriter | None = None
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(target.host, target.port),
            timeout=timeout,
        )
        return PortOutcome(target, PortState.OPEN)
    except TimeoutError:
        return PortOutcome(target, PortState.TIMEOUT)
    except ConnectionRefusedError:
        return PortOutcome(target, PortState.CLOSED)
    except OSError as exc:
        return PortOutcome(target, PortState.ERROR, str(exc) or exc.__class__.__name__)
    except ValueError as exc:
        # UnicodeError from IDNA-encoding a malformed hostname
        return PortOutcome(target, PortState.ERROR, str(exc) or exc.__class__.__name__)
    finally:
        if writer is not None:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()
