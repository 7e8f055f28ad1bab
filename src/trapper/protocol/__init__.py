from . import fields
from . import message
from . import wire
from . import response

from .message import Metric, Packet
from .response import Response, Status


"""
Trapper Protocol Layer
======================

This package defines the message model and the framing used to submit
metrics to a trapper port. It is independent of how the bytes are moved;
see :mod:`trapper.transport` for that.

---------------------------------------------------------------------

Layer Overview
--------------

Sender (trapper.sender)
    send(packet): encode, exchange, validate

    │
    ▼
Message Model (message.py)
    - Metric: host, key, value, clock
    - Packet: request discriminator + ordered metrics

    │
    ▼
Framing (wire.py)
    [ZBXD][0x01][uint64 LE length][JSON body]

    │
    ▼
Response Model (response.py)
    - strip the 13-byte header
    - decode JSON, require 'response' and 'info'
    - extract processed / failed / total / seconds spent

Field Vocabulary (fields.py)
    Canonical names and constants for all of the above

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
