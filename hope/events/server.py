import asyncio
import logging
import socket
from contextlib import AsyncExitStack, contextmanager
from pathlib import Path
from typing import Awaitable, Callable, Iterator, Self

from concurrent_tasks import BackgroundTask
from pydantic import BaseModel

from hope.errors import DecodeError, TransportError
from hope.events.interface import Event

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


class SocketConfig(BaseModel):
    path: Path = Path("/tmp/hope.sock")
    backlog: int = 1


class EventsServer(AsyncExitStack):
    """Receive pianobar events over a Unix socket, one event per connection.

    Connections are handled one at a time, in the order they are accepted:
    the whole message is read, decoded and processed before accepting the next.
    There is no read timeout, a client that never closes its side stalls the server.
    """

    def __init__(
        self,
        config: SocketConfig,
        process: Callable[[Event], Awaitable],
    ):
        super().__init__()
        self._config = config
        self._process = process
        self._serve_task: BackgroundTask | None = None

    async def __aenter__(self) -> Self:
        try:
            sock = self.enter_context(self._listen())
        except OSError as e:
            raise TransportError(f"cannot listen on {self._config.path}: {e}") from e
        self._serve_task = BackgroundTask(self._serve, sock)
        self._serve_task.create()
        self.callback(self._serve_task.cancel)
        return self

    @contextmanager
    def _listen(self) -> Iterator[socket.socket]:
        path = self._config.path
        if path.exists() or path.is_symlink():
            logger.debug("removing stale socket %s", path)
            path.unlink()
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.bind(str(path))
            try:
                sock.listen(self._config.backlog)
                sock.setblocking(False)
                logger.debug("listening on %s", path)
                yield sock
            finally:
                path.unlink(missing_ok=True)

    async def serve_forever(self) -> None:
        """Wait for the accept loop, which only stops when it cannot accept anymore.

        The failure is reported to the event loop exception handler.
        """
        if not self._serve_task:
            raise RuntimeError("server is not started")
        await self._serve_task

    async def _serve(self, sock: socket.socket) -> None:
        loop = asyncio.get_running_loop()
        while True:
            logger.debug("waiting for a connection")
            try:
                conn, _ = await loop.sock_accept(sock)
            except OSError as e:
                loop.call_exception_handler(
                    {
                        "message": "events server stopped",
                        "exception": TransportError(f"cannot accept connections: {e}"),
                    }
                )
                return
            logger.debug("received a connection")
            with conn:
                try:
                    event = Event.decode(await self._receive(conn))
                except (TransportError, DecodeError) as e:
                    logger.warning("invalid event received: %s", e)
                    continue
            logger.debug("received %r", event)
            try:
                await self._process(event)
            except Exception:
                logger.exception("error processing %s eventcmd", event.eventcmd)

    @staticmethod
    async def _receive(conn: socket.socket) -> bytes:
        """Read until the client closes its side of the connection."""
        loop = asyncio.get_running_loop()
        chunks = []
        try:
            while chunk := await loop.sock_recv(conn, _CHUNK_SIZE):
                chunks.append(chunk)
        except OSError as e:
            raise TransportError(f"cannot read event: {e}") from e
        return b"".join(chunks)
