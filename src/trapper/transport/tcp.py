"""TCP transport for one trapper exchange.

A :class:`Client` is good for exactly one connect, one send and one receive;
it is not reused between submissions. Use it as a context manager so the
socket is released whatever happens in between:

    with Client(address, port) as client:
        client.send(frame)
        raw = client.recv()
"""

from __future__ import annotations

import logging
import socket
from typing import Optional

from ..exceptions import NetworkError, TransportTimeout
from ..protocol import fields
from .base import Transport


logger = logging.getLogger(__name__)


class Client(Transport):
    """Connect to a trapper port and exchange a single request/response.

    *timeout* is applied to the connect and to every subsequent socket
    operation. The default of None blocks indefinitely.
    """

    def __init__(self, address: str, port: int = fields.DEFAULT_PORT, timeout: Optional[float] = None):
        self.address = address
        self.port = int(port)
        self.timeout = timeout
        self.socket: Optional[socket.socket] = None

    def __repr__(self) -> str:
        return f"tcp.Client({self.address!r}, {self.port})"

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self) -> None:
        if self.socket is not None:
            return

        server = (self.address, self.port)

        try:
            self.socket = socket.create_connection(server, timeout=self.timeout)
        except socket.timeout as e:
            raise TransportTimeout(
                f"can't connect to {self.address}:{self.port}: no answer in {self.timeout} sec"
            ) from e
        except OSError as e:
            raise NetworkError(f"can't connect to {self.address}:{self.port}: {e}") from e

        logger.debug("connected to %s:%d", self.address, self.port)

    def close(self) -> None:
        sock = self.socket
        self.socket = None

        if sock is None:
            return

        try:
            sock.close()
        except OSError:
            # Nothing further can be done with a socket that won't close.
            logger.debug("error closing connection to %s:%d", self.address, self.port, exc_info=True)

    def _require_socket(self) -> socket.socket:
        if self.socket is None:
            raise NetworkError(f"not connected to {self.address}:{self.port}")
        return self.socket

    def send(self, data: bytes) -> int:
        """Write all of *data*, continuing after short writes.

        A write that makes no progress ends the attempt; anything less than
        the full length at that point is an error.
        """

        sock = self._require_socket()
        length = len(data)
        view = memoryview(data)
        total = 0

        while total < length:
            try:
                sent = sock.send(view[total:])
            except socket.timeout as e:
                raise TransportTimeout(
                    f"sent {total} of {length} bytes to {self.address}:{self.port}, then timed out"
                ) from e
            except OSError as e:
                raise NetworkError(
                    f"can't send {length} bytes to {self.address}:{self.port}: {e}"
                ) from e

            if sent == 0:
                break

            total += sent
            if total < length:
                logger.debug("short write to %s:%d, %d of %d bytes", self.address, self.port, total, length)

        if total != length:
            if total == 0:
                raise NetworkError(f"can't send {length} bytes to {self.address}:{self.port}")
            raise NetworkError(f"incorrect count of bytes {total} sent, expected: {length}")

        logger.debug("sent %d bytes to %s:%d", total, self.address, self.port)
        return total

    def recv(self, size: Optional[int] = None) -> bytes:
        """Issue a single receive of up to *size* bytes.

        There is no loop: a response longer than *size* is truncated.
        """

        if size is None:
            size = fields.RECEIVE_SIZE

        sock = self._require_socket()

        try:
            data = sock.recv(size)
        except socket.timeout as e:
            raise TransportTimeout(
                f"no response from {self.address}:{self.port} in {self.timeout} sec"
            ) from e
        except OSError as e:
            raise NetworkError(f"can't receive response from {self.address}:{self.port}: {e}") from e

        if not data:
            raise NetworkError(f"can't receive response from {self.address}:{self.port}: connection closed")

        logger.debug("received %d bytes from %s:%d", len(data), self.address, self.port)
        return data
