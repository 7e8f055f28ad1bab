"""Transport layer implementations."""

from ..exceptions import (
    NetworkError,
    TransportTimeout,
)
from .base import Transport
from . import tcp
