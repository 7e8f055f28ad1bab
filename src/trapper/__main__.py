""" Command-line submission of a single metric, in the manner of
    zabbix_sender::

        python -m trapper -z zabbix.example.com -s web01 -k app.requests -o 42

    Options not given on the command line fall back to the TRAPPER_*
    environment variables; see :mod:`trapper.config`.
"""

import argparse
import logging
import sys

from . import config
from .exceptions import TrapperError
from .protocol import fields
from .protocol.message import Metric, Packet
from .sender import Sender


def parse_arguments(argv=None):

    description = 'Send a single metric to a trapper port.'
    parser = argparse.ArgumentParser(prog='trapper-send', description=description)

    parser.add_argument('-z', '--zabbix-server', dest='server_address',
                        help='hostname or IP address of the server')
    parser.add_argument('-p', '--port', dest='server_port', type=int,
                        help='server port number (default %d)' % (fields.DEFAULT_PORT))
    parser.add_argument('-s', '--host', dest='host',
                        help='host the metric is attributed to (default: this hostname)')
    parser.add_argument('-k', '--key', required=True,
                        help='item key')
    parser.add_argument('-o', '--value', required=True,
                        help='item value')
    parser.add_argument('-t', '--timestamp', type=int,
                        help='UNIX timestamp of the observation (default: now)')
    parser.add_argument('-T', '--timeout', type=float,
                        help='seconds to wait on connect, send and receive (default: no limit)')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='log progress; repeat for debug output')

    return parser.parse_args(argv)


def main(argv=None):

    arguments = parse_arguments(argv)

    if arguments.verbose > 1:
        level = logging.DEBUG
    elif arguments.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    try:
        metric = Metric(arguments.key, arguments.value)

        if arguments.host is not None:
            metric.with_hostname(arguments.host)
        if arguments.timestamp is not None:
            metric.with_timestamp(arguments.timestamp)

        packet = Packet()
        packet.add_metric(metric)

        options = config.environment()

        for name in ('server_address', 'server_port', 'timeout'):
            value = getattr(arguments, name)
            if value is not None:
                options[name] = value

        sender = Sender().configure(options)
        response = sender.send(packet)
    except (TrapperError, ValueError) as e:
        sys.stderr.write('trapper-send: %s\n' % (e))
        return 1

    if response is None:
        print('sending disabled, nothing sent')
    else:
        print('%s: %s' % (response.response, response.info))

    return 0


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
