""" Interpretation of the server acknowledgement. The server answers every
    submission with a frame whose JSON body looks like::

        {"response": "success",
         "info": "processed: 2; failed: 0; total: 2; seconds spent: 0.000059"}

    :func:`parse` turns the raw bytes received from the socket into a
    :class:`Response` instance, raising :class:`ResponseError` if the body
    cannot be interpreted.
"""

import enum
import re

from .. import json
from ..exceptions import ResponseError
from . import fields
from . import wire


# Only the four numeric captures matter; the labels are matched loosely.

info_pattern = re.compile(r'\w+: (\d+); \w+: (\d+); \w+: (\d+); [a-z ]+: (\d+\.\d+)')


def _required(body, name):
    """ Return the string field *name* from *body*. A null value counts as
        missing, the same as an absent field.
    """

    value = body.get(name)

    if value is None:
        raise ResponseError('invalid server response, missing `%s` field' % (name))

    if not isinstance(value, str):
        raise ResponseError('invalid server response, `%s` field is not a string: %r' % (name, value))

    return value


class Status(enum.Enum):
    SUCCESS = 'success'
    OTHER = 'other'


class Response:
    """ The decoded acknowledgement for a single submission. The *response*
        and *info* arguments are the raw string fields from the server; the
        counters are extracted from *info* upon construction.

        The server is expected to report *total* as the sum of *processed*
        and *failed*; this is not checked, the values are kept as reported.

        :ivar status: :class:`Status.SUCCESS` or :class:`Status.OTHER`.
        :ivar processed: Number of metrics the server accepted.
        :ivar failed: Number of metrics the server rejected.
        :ivar total: Number of metrics the server saw.
        :ivar seconds_spent: Server-side processing time.
    """

    def __init__(self, response, info):

        self.response = response
        self.info = info

        if response == fields.SUCCESS:
            self.status = Status.SUCCESS
        else:
            self.status = Status.OTHER

        matched = None
        if isinstance(info, str):
            matched = info_pattern.search(info)

        if matched is None:
            raise ResponseError("pattern '%s' did not match info %r" % (info_pattern.pattern, info))

        self.processed = int(matched.group(1))
        self.failed = int(matched.group(2))
        self.total = int(matched.group(3))
        self.seconds_spent = float(matched.group(4))


    def __repr__(self):
        return 'Response(%r, processed=%d, failed=%d, total=%d, seconds_spent=%f)' % (
            self.response, self.processed, self.failed, self.total, self.seconds_spent)


    @property
    def success(self):
        return self.status is Status.SUCCESS


    @classmethod
    def from_dict(cls, body):
        """ Build a :class:`Response` from an already decoded JSON body,
            checking that the required fields are present.
        """

        if not isinstance(body, dict):
            raise ResponseError('invalid server response, expected a JSON object: %r' % (body,))

        response = _required(body, fields.RESPONSE)
        info = _required(body, fields.INFO)

        return cls(response, info)


# end of class Response



def parse(raw):
    """ Interpret *raw*, the bytes received from the server, as a
        :class:`Response`. The first 13 bytes are dropped unconditionally as
        the frame header; the remainder must be a JSON document.
    """

    payload = wire.unpack_frame(raw)

    try:
        text = payload.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ResponseError("can't decode server response %r, reason: %s" % (payload, e)) from e

    try:
        body = json.loads(text)
    except json.DecodeError as e:
        raise ResponseError("can't decode server response %r, reason: %s" % (text, e)) from e

    return Response.from_dict(body)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
