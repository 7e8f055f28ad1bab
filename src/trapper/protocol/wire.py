from __future__ import annotations

import struct

from ..exceptions import FrameError
from . import fields
from .message import Packet


_HEADER = struct.Struct(fields.HEADER_FORMAT)


def pack_frame(packet: Packet) -> bytes:
    """
    Serialize Packet -> bytes

    Layout:
        [ZBXD][version: 1 byte][body length: uint64 LE][JSON body]

    The byte order is fixed little-endian, whatever the platform.
    """

    body = packet.encapsulate()
    header = _HEADER.pack(fields.HEADER, fields.VERSION, len(body))
    return header + body


def unpack_header(frame: bytes) -> int:
    """
    Return the body length declared by the header at the start of *frame*.
    """

    if frame is None or len(frame) < fields.HEADER_LENGTH:
        received = 0 if frame is None else len(frame)
        raise FrameError(
            f"need {fields.HEADER_LENGTH} bytes to read a frame header, got {received}"
        )

    magic, _version, length = _HEADER.unpack_from(frame)

    # The version byte doubles as a flags field on newer servers, so only
    # the magic is checked.
    if magic != fields.HEADER:
        raise FrameError(f"bad frame header: expected {fields.HEADER!r}, got {magic!r}")

    return length


def unpack_frame(frame: bytes) -> bytes:
    """
    Strip the fixed-size header, returning whatever follows it.

    The declared length is not consulted; the body is everything after
    the first 13 bytes.
    """

    return bytes(frame[fields.HEADER_LENGTH:])
