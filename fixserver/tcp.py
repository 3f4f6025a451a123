"""A TCP server that listens on a port and talks to one client at a time."""

from __future__ import annotations

import logging
import socket

log = logging.getLogger(__name__)

TCP_BUFFER_SIZE = 1024


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


class TCPServer:
    """Listening socket plus the currently accepted client."""

    def __init__(self, max_connections: int) -> None:
        self.max_connections = max_connections
        self._server: socket.socket | None = None
        self._client: socket.socket | None = None

    def __enter__(self) -> TCPServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def port(self) -> int | None:
        """The bound port, or None when not started."""
        return None if self._server is None else self._server.getsockname()[1]

    def start(self, port: int) -> None:
        """Bind to ``port`` on all interfaces and listen; raises OSError on failure."""
        if self._server is not None:
            raise RuntimeError("server already started")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(("", port))
        except OSError:
            log.error("Error binding socket")
            sock.close()
            raise
        try:
            sock.listen(self.max_connections)
        except OSError:
            log.error("Error listening on socket")
            sock.close()
            raise
        self._server = sock

    def stop(self) -> None:
        """Close the client and listening sockets."""
        for sock in (self._server, self._client):
            if sock is not None:
                sock.close()
        self._server = None
        self._client = None

    def accept_client(self) -> tuple:
        """Block until a client connects and return its address."""
        if self._server is None:
            raise RuntimeError("server not started")
        try:
            client, address = self._server.accept()
        except OSError:
            log.error("Error accepting connection")
            raise
        if self._client is not None:
            self._client.close()
        self._client = client
        return address

    def read_from_client(self) -> str:
        """Receive up to one buffer of data; an empty string means the client left."""
        client = self._require_client()
        data = client.recv(TCP_BUFFER_SIZE)
        if not data:
            log.info("Client disconnected")
            return ""
        return _decode(data)

    def write_to_client(self, data: str) -> None:
        """Send ``data`` to the client; raises OSError on failure."""
        client = self._require_client()
        try:
            client.sendall(_encode(data))
        except OSError:
            log.error("Error writing to client")
            raise

    def is_client_connected(self) -> bool:
        return self._client is not None

    def _require_client(self) -> socket.socket:
        if self._client is None:
            raise RuntimeError("no client connected")
        return self._client