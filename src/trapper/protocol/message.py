""" Class representations of the trapper data model: a single :class:`Metric`
    observation, and the :class:`Packet` that bundles metrics together for
    a single transmission.
"""

import socket
import time as timemodule

from .. import json
from . import fields


class Metric:
    """ A :class:`Metric` is one timestamped key/value observation attributed
        to a host. The *key* identifies the monitored item on the server side,
        and must be a non-empty string; the *value* is transmitted as a string,
        converted with str() if it is not one already.

        The *host* defaults to the local hostname, and the *clock* defaults to
        the time of construction; both can be overridden with
        :func:`with_hostname` and :func:`with_timestamp`, which modify this
        instance and return it so that the calls can be chained.

        :ivar host: The hostname this observation is attributed to.
        :ivar key: The item key.
        :ivar value: The observed value, as a string.
        :ivar clock: A UNIX epoch timestamp, in whole seconds.
    """

    def __init__(self, key, value):

        if not isinstance(key, str):
            raise TypeError('a metric key must be a string, not ' + type(key).__name__)

        if key == '':
            raise ValueError('a metric requires a non-empty key')

        # Numbers and other scalars are converted with str(); None is not a
        # value. The server does its own interpretation according to the
        # item type.

        if value is None:
            raise TypeError('a metric requires a value, not None')

        if not isinstance(value, str):
            value = str(value)

        self.key = key
        self.value = value
        self.host = socket.gethostname()
        self.clock = int(timemodule.time())


    def __repr__(self):
        return 'Metric(%r, %r, host=%r, clock=%d)' % (self.key, self.value, self.host, self.clock)


    def __eq__(self, other):
        if not isinstance(other, Metric):
            return NotImplemented

        return self.to_dict() == other.to_dict()


    def with_hostname(self, host):
        """ Attribute this metric to *host* instead of the local hostname.
        """

        self.host = str(host)
        return self


    def with_timestamp(self, timestamp):
        """ Use *timestamp* (UNIX epoch seconds) instead of the time of
            construction.
        """

        self.clock = int(timestamp)
        return self


    def to_dict(self):
        """ Return the dictionary form used on the wire. The field order
            matches what the server documentation shows.
        """

        metric = dict()
        metric[fields.HOST] = self.host
        metric[fields.KEY] = self.key
        metric[fields.VALUE] = self.value
        metric[fields.CLOCK] = self.clock
        return metric


# end of class Metric



class Packet:
    """ A :class:`Packet` is the JSON document sent to the server in a
        single frame. It carries a fixed *request* discriminator, which is
        'sender data' for metric submission, and the ordered sequence of
        :class:`Metric` instances added to it.

        The order of the metrics is preserved; the server reports processed
        and failed counts in aggregate, so the order only matters when
        correlating a submission against the server log.
    """

    def __init__(self, request=fields.SENDER_DATA):

        self.request = request
        self.data = list()


    def __iter__(self):
        return iter(self.data)


    def __len__(self):
        return len(self.data)


    def __repr__(self):
        return self.encapsulate().decode('utf-8')


    def add_metric(self, metric):
        """ Append a :class:`Metric` to this packet. The packet owns the
            metric from here on; adding the same instance to a second packet
            is not supported.
        """

        if not isinstance(metric, Metric):
            raise TypeError('expected a Metric, not ' + type(metric).__name__)

        self.data.append(metric)
        return self


    def get_packet(self):
        """ Return the structured form of this packet: a dictionary with the
            'request' field, and the 'data' field if any metrics were added.
        """

        packet = dict()
        packet[fields.REQUEST] = self.request

        if len(self.data) > 0:
            packet[fields.DATA] = [metric.to_dict() for metric in self.data]

        return packet


    def encapsulate(self):
        """ Return the JSON encoding of :func:`get_packet` as bytes. Unlike
            the metrics it contains, the encoding is not cached; adding a
            metric after calling this method is reflected in the next call.
        """

        return json.dumps(self.get_packet())


# end of class Packet


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
