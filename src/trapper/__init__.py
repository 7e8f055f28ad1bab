""" Python client for the trapper protocol: package metric observations into
    a framed JSON packet, submit it to a monitoring server over TCP, and
    check the server's acknowledgement.
"""

__version__ = "1.0.0"

# Utility components.

from . import json
from . import exceptions
from .exceptions import (
    TrapperError,
    NetworkError,
    TransportTimeout,
    ResponseError,
    FrameError,
)

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import config

# Primary public-facing interfaces.

from .protocol import Metric, Packet, Response, Status
from .sender import Sender

from . import registry
get = registry.get

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
