"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`trapper.protocol` so the protocol remains
transport-agnostic: a transport moves bytes, it does not know about frames.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Transport(ABC):
    """Minimal contract for a single request/response exchange."""

    def __enter__(self) -> "Transport":
        self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection/socket."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection/socket."""

    @abstractmethod
    def send(self, data: bytes) -> int:
        """Send all of *data*, returning the number of bytes written."""

    @abstractmethod
    def recv(self, size: Optional[int] = None) -> bytes:
        """Receive up to *size* bytes."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
