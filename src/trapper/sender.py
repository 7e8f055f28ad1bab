""" The :class:`Sender` is the principal entry point for submitting metrics:
    it encodes a :class:`trapper.Packet`, exchanges it with the server over
    a fresh TCP connection, and checks the acknowledgement.
"""

import logging
import threading

from . import config
from . import registry
from .exceptions import ResponseError
from .protocol import fields
from .protocol import response
from .protocol import wire
from .transport import tcp


logger = logging.getLogger(__name__)


class Sender:
    """ Submit packets to the trapper port at *server_address* and
        *server_port*. If *disable* is True, :func:`send` returns without
        touching the network; this is the switch that allows instrumented
        code to run where no server is available.

        *timeout*, in seconds, bounds the connect, send and receive steps.
        The default of None blocks indefinitely, the same as a plain socket.

        The configuration can be changed after construction with
        :func:`configure`, :func:`enable` and :func:`disable`. Each call to
        :func:`send` works from a consistent snapshot of the configuration
        taken when the call begins; changes made while a send is in flight
        apply to the next one.

        :ivar transport: The class used for the connection, instantiated
            once per :func:`send` as ``transport(address, port, timeout)``.
    """

    transport = tcp.Client

    def __init__(self, server_address=None, server_port=fields.DEFAULT_PORT, disable=False, timeout=None):

        self.lock = threading.Lock()

        self.server_address = None
        self.server_port = fields.DEFAULT_PORT
        self.disabled = False
        self.timeout = None

        self.configure(server_address=server_address, server_port=server_port, disable=disable, timeout=timeout)


    def __repr__(self):
        return 'Sender(%r, %d%s)' % (self.server_address, self.server_port, ', disabled' if self.disabled else '')


    @classmethod
    def instance(cls, name='default', registry=None):
        """ Return the shared :class:`Sender` known as *name*, creating it
            on first access. The process-wide :data:`trapper.registry.default`
            is used unless a specific *registry* is provided.
        """

        if registry is None:
            registry = _registry.default

        return registry.get(name)


    @property
    def enabled(self):
        return not self.disabled


    def configure(self, options=None, **kwargs):
        """ Apply any subset of the recognized options, provided either as
            a dictionary or as keyword arguments (or both; keyword arguments
            win). The options are validated before any of them are applied,
            so a rejected call leaves the configuration unchanged.

            Returns this instance.
        """

        merged = dict()
        if options is not None:
            merged.update(options)
        merged.update(kwargs)

        normalized = config.normalize(merged)

        with self.lock:
            for name, value in normalized.items():
                if name == 'disable':
                    self.disabled = value
                else:
                    setattr(self, name, value)

        return self


    def enable(self):
        with self.lock:
            self.disabled = False
        return self


    def disable(self):
        with self.lock:
            self.disabled = True
        return self


    def send(self, packet):
        """ Submit *packet* and return the server's :class:`Response`.
            Returns None without any network activity if this sender is
            disabled.

            Raises :class:`NetworkError` if the exchange fails, and
            :class:`ResponseError` if the acknowledgement cannot be parsed or
            does not report success.
        """

        with self.lock:
            address = self.server_address
            port = self.server_port
            disabled = self.disabled
            timeout = self.timeout

        if disabled:
            logger.info('sender disabled, dropping %d metrics', len(packet))
            return None

        if address is None:
            raise ValueError('no server_address configured')

        frame = wire.pack_frame(packet)

        with self.transport(address, port, timeout) as connection:
            connection.send(frame)
            raw = connection.recv(fields.RECEIVE_SIZE)

        parsed = response.parse(raw)

        if not parsed.success:
            logger.warning('%s:%d returned %r: %s', address, port, parsed.response, parsed.info)
            raise ResponseError('server returned non-successful response %r: %s' % (parsed.response, parsed.info), parsed)

        logger.debug('%s:%d: %s', address, port, parsed.info)
        return parsed


# end of class Sender


# The module name is shadowed by the 'registry' argument of Sender.instance().

_registry = registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
