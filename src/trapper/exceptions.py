"""Exception hierarchy shared by the protocol and transport layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .protocol.response import Response


class TrapperError(Exception):
    """Base class for all errors raised by this package."""


# Transport

class NetworkError(TrapperError):
    """Socket creation, connect, send or receive failed."""


class TransportTimeout(NetworkError):
    """A socket operation did not complete within the configured timeout."""


# Protocol

class FrameError(TrapperError, ValueError):
    """Not enough bytes, or the wrong bytes, to interpret a frame header."""


class ResponseError(TrapperError):
    """The server response could not be interpreted, or was not a success.

    When the response was parsed but reported a non-success status, the
    parsed :class:`~trapper.protocol.response.Response` is available as
    ``response``; otherwise it is None.
    """

    def __init__(self, message: str, response: Optional["Response"] = None):
        super().__init__(message)
        self.message = message
        self.response = response

    def __str__(self) -> str:
        return self.message
