import asyncio
import sys
from pathlib import Path
from typing import TextIO

from hope.errors import TransportError
from hope.events.info import Info
from hope.events.interface import Event


def read_info(stream: TextIO | None = None) -> Info:
    """Read the event info pianobar writes on stdin.

    :raises InvalidInfo: if the info cannot be parsed.
    """
    return Info.parse((stream or sys.stdin).read())


async def send_event(path: Path, event: Event) -> None:
    """Send a single event and close the connection, nothing is read back.

    :raises TransportError: if the server cannot be reached, there is no retry.
    """
    try:
        _, writer = await asyncio.open_unix_connection(path)
        try:
            writer.write(event.encode())
            writer.write_eof()
            await writer.drain()
        finally:
            writer.close()
            await writer.wait_closed()
    except OSError as e:
        raise TransportError(f"cannot send event to {path}: {e}") from e
