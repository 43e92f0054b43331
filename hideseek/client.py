"""Blocking client for the multiplayer game server.

Requests are JSON values sent one per line; each request is answered by
exactly one JSON line from the server.  A background worker thread owns the
socket, so callers only ever exchange whole requests and responses with it.
"""

from __future__ import annotations

import json
import logging
import queue
import socket
import threading
import time
from dataclasses import dataclass
from typing import Any, Optional, Union

log = logging.getLogger(__name__)

SEEKING_MAX_TIME = 5000
SEEKING_MAX_TRIES = 3

RW_TIMEOUT_SECS = 2.0
COMMON_TIMEOUT_SECS = 0.1

_POLL_INTERVAL = 0.05
_STOP = object()

Address = Union[tuple, str]


class ClientError(Exception):
    """Raised when the client cannot connect or start."""


class RequestError(Exception):
    """Raised when a request could not be completed."""


class ServerClosedError(RequestError):
    """Raised when the server closed the connection."""


class RequestTimeoutError(RequestError):
    """Raised when no response arrived in time."""


@dataclass
class PingSessionResult:
    """Outcome of a series of ping requests; durations are in seconds."""

    session_duration: float
    results: list[Optional[float]]
    loss_rate: float
    average_duration: Optional[float]


def _parse_address(address: Address) -> tuple:
    if isinstance(address, str):
        host, sep, port = address.rpartition(":")
        if not sep or not port.isdigit():
            raise ClientError(f"Invalid address '{address}'")
        return host.strip("[]"), int(port)
    return tuple(address)


class _LineReader:
    """Reads newline-terminated lines from a socket that may time out."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._pending = bytearray()

    def readline(self) -> bytes:
        """Return the next line, a trailing partial line, or b'' at end of stream."""
        while True:
            end = self._pending.find(b"\n")
            if end >= 0:
                line = bytes(self._pending[: end + 1])
                del self._pending[: end + 1]
                return line
            chunk = self._sock.recv(4096)
            if not chunk:
                line = bytes(self._pending)
                self._pending.clear()
                return line
            self._pending.extend(chunk)


class MultiplayerClient:
    """A connected, not yet running client."""

    def __init__(self, sock: socket.socket) -> None:
        self._socket: Optional[socket.socket] = sock

    @classmethod
    def connect(cls, address: Address) -> "MultiplayerClient":
        """Connect to the server at ``address`` (a (host, port) pair or 'host:port')."""
        log.info("Client attempts to connect to server %r...", address)
        try:
            sock = socket.create_connection(_parse_address(address))
            sock.settimeout(RW_TIMEOUT_SECS)
        except OSError as exc:
            raise ClientError(f"IoError, reason='{exc}'") from exc
        log.info("Client %s connected!", sock.getsockname())
        return cls(sock)

    def run(self) -> "ClientHandle":
        """Start the worker thread and hand over the connection to it."""
        if self._socket is None:
            raise ClientError("Client is already running")
        sock, self._socket = self._socket, None
        return ClientHandle(sock)


class ClientHandle:
    """Handle to a running client; sends requests and waits for responses."""

    def __init__(self, sock: socket.socket) -> None:
        self._socket = sock
        self._requests: queue.Queue = queue.Queue()
        self._responses: queue.Queue = queue.Queue()
        self._thread = threading.Thread(target=self._serve, name="multiplayer-client", daemon=True)
        self._thread.start()

    def __enter__(self) -> "ClientHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _serve(self) -> None:
        reader = _LineReader(self._socket)
        while True:
            line = self._requests.get()
            if line is _STOP:
                log.info("Request channel closed. Exiting client loop")
                break

            try:
                self._socket.sendall(line)
            except OSError as exc:
                self._responses.put(RequestError(f"IoError, reason='{exc}'"))
                continue

            try:
                raw = reader.readline()
            except OSError as exc:
                log.error("Other error during receiving response %s", exc)
                self._responses.put(RequestError(f"IoError, reason='{exc}'"))
                continue

            if not raw:
                log.warning("Server got closed")
                self._responses.put(ServerClosedError("Server closed"))
                break

            try:
                response = json.loads(raw)
            except ValueError as exc:
                log.error("Could not deserialize response, reason %s", exc)
                self._responses.put(RequestError(f"SerdeError, reason='{exc}'"))
                continue

            self._responses.put(response)

    def _await_response(self, timeout: Optional[float]) -> Any:
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            wait = _POLL_INTERVAL
            if deadline is not None:
                wait = min(wait, max(0.0, deadline - time.monotonic()))
            try:
                item = self._responses.get(timeout=wait)
            except queue.Empty:
                if not self._thread.is_alive() and self._responses.empty():
                    raise RequestError("Client loop has stopped") from None
                if deadline is not None and time.monotonic() >= deadline:
                    raise RequestTimeoutError(
                        f"TimeoutReceive reason='no response within {timeout}s'"
                    ) from None
                continue
            if isinstance(item, Exception):
                raise item
            return item

    def make_request_with_timeout(self, request: Any, timeout: Optional[float]) -> Any:
        """Send ``request`` and return the decoded response.

        ``timeout`` is in seconds; ``None`` waits until a response arrives.
        """
        line = (json.dumps(request) + "\n").encode("utf-8")
        if not self._thread.is_alive():
            raise RequestError("Client loop has stopped")
        self._requests.put(line)
        return self._await_response(timeout)

    def make_request(self, request: Any) -> Any:
        """Send ``request`` with the common short timeout."""
        return self.make_request_with_timeout(request, COMMON_TIMEOUT_SECS)

    def ping(self, request: Any, count: int, interval: float, timeout: float) -> PingSessionResult:
        """Send ``request`` ``count`` times and measure each round trip."""
        if count <= 0:
            raise ValueError("count must be positive")

        session_start = time.monotonic()
        results: list[Optional[float]] = []
        for _ in range(count):
            start = time.monotonic()
            try:
                self.make_request_with_timeout(request, timeout)
            except RequestError:
                results.append(None)
            else:
                results.append(time.monotonic() - start)
            time.sleep(interval)

        successes = [r for r in results if r is not None]
        lost = len(results) - len(successes)
        loss_rate = 100.0 * lost / len(results)
        average = sum(successes) / len(successes) if successes else None

        return PingSessionResult(
            session_duration=time.monotonic() - session_start,
            results=results,
            loss_rate=loss_rate,
            average_duration=average,
        )

    def wait_until_finished(self) -> None:
        """Block until the worker thread has exited."""
        self._thread.join()

    def shutdown(self) -> None:
        """Stop the worker thread and close the connection."""
        self._requests.put(_STOP)
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError as exc:
            log.debug("Socket shutdown failed: %s", exc)
        self._thread.join()
        self._socket.close()