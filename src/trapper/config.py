""" Recognized configuration options for a :class:`trapper.Sender`, with
    the validation applied when they are set, and the environment variables
    that supply defaults for registry-created instances.

    The recognized options are:

    ================  =========  =======  ============================
    option            type       default  environment variable
    ================  =========  =======  ============================
    server_address    str        None     TRAPPER_SERVER_ADDRESS
    server_port       int        10051    TRAPPER_SERVER_PORT
    disable           bool       False    TRAPPER_DISABLE
    timeout           float      None     TRAPPER_TIMEOUT
    ================  =========  =======  ============================

    A timeout of None blocks indefinitely on connect, send and receive.
"""

import os

from .protocol import fields


_true = set(('1', 'true', 'yes', 'on'))
_false = set(('0', 'false', 'no', 'off', ''))


def _address(value):

    if value is None:
        return None

    if not isinstance(value, str):
        raise TypeError('server_address must be a string, not ' + type(value).__name__)

    value = value.strip()
    if value == '':
        raise ValueError('server_address cannot be empty')

    return value


def _port(value):

    # bool is an int subclass; True is not a port number.

    if isinstance(value, bool):
        raise TypeError('server_port must be an integer, not bool')

    if isinstance(value, float) and not value.is_integer():
        raise ValueError('server_port must be a whole number: ' + repr(value))

    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError('server_port must be an integer: ' + repr(value))

    if port < 1 or port > 65535:
        raise ValueError('server_port out of range: ' + str(port))

    return port


def _flag(value):

    if isinstance(value, bool):
        return value

    if isinstance(value, int):
        return value != 0

    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _true:
            return True
        if lowered in _false:
            return False

    raise ValueError('disable must be a boolean: ' + repr(value))


def _timeout(value):

    if value is None or value == '':
        return None

    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError('timeout must be a number of seconds: ' + repr(value))

    if timeout <= 0:
        raise ValueError('timeout must be positive: ' + repr(value))

    return timeout


# Each option maps to its default value, its validator, and the
# environment variable consulted by environment().

OPTIONS = dict()
OPTIONS['server_address'] = (None, _address, 'TRAPPER_SERVER_ADDRESS')
OPTIONS['server_port'] = (fields.DEFAULT_PORT, _port, 'TRAPPER_SERVER_PORT')
OPTIONS['disable'] = (False, _flag, 'TRAPPER_DISABLE')
OPTIONS['timeout'] = (None, _timeout, 'TRAPPER_TIMEOUT')


def defaults():
    """ Return a new dictionary with the default value of every option.
    """

    return dict((name, option[0]) for name, option in OPTIONS.items())


def normalize(options):
    """ Validate and coerce a mapping of *options*, returning a new
        dictionary with only the options that were present. Unknown option
        names raise KeyError; invalid values raise ValueError or TypeError.
    """

    normalized = dict()

    for name, value in options.items():
        try:
            option = OPTIONS[name]
        except KeyError:
            raise KeyError('unknown option: ' + repr(name))

        validator = option[1]
        normalized[name] = validator(value)

    return normalized


def environment(environ=None):
    """ Return the normalized subset of options set via environment
        variables. *environ* defaults to :data:`os.environ`.
    """

    if environ is None:
        environ = os.environ

    found = dict()

    for name, option in OPTIONS.items():
        variable = option[2]
        try:
            found[name] = environ[variable]
        except KeyError:
            continue

    return normalize(found)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
