import pytest
import socketserver
import struct
import threading

import trapper


SUCCESS_INFO = 'processed: 2; failed: 0; total: 2; seconds spent: 0.000059'

# Sentinel reply: hold the connection open without answering.
HANG = object()


def frame(body):
    """ Wrap *body* (bytes) in a trapper header.
    """

    return b'ZBXD\x01' + struct.pack('<Q', len(body)) + body


class Handler(socketserver.StreamRequestHandler):

    def handle(self):

        fake = self.server.fake

        header = self.rfile.read(13)
        if len(header) < 13:
            return

        length = struct.unpack('<Q', header[5:13])[0]
        body = self.rfile.read(length)
        fake.received.append((header, body))

        reply = fake.reply

        if reply is None:
            # Close without answering.
            return

        if reply is HANG:
            fake.release.wait(5)
            return

        if isinstance(reply, dict):
            reply = frame(trapper.json.dumps(reply))

        self.wfile.write(reply)


class Server(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


class FakeServer:
    """ A trapper port on localhost that records what it receives and
        answers with *reply*: a dictionary (framed as JSON), raw bytes
        (sent as-is), None (hang up) or HANG (never answer).
    """

    HANG = HANG

    def __init__(self):

        self.received = list()
        self.reply = {'response': 'success', 'info': SUCCESS_INFO}
        self.release = threading.Event()

        self.server = Server(('127.0.0.1', 0), Handler)
        self.server.fake = self

        self.address, self.port = self.server.server_address

        self.thread = threading.Thread(target=self.server.serve_forever)
        self.thread.daemon = True
        self.thread.start()


    def bodies(self):
        return [trapper.json.loads(body) for header, body in self.received]


    def stop(self):
        self.release.set()
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def fake_server():

    server = FakeServer()

    yield server

    server.stop()


@pytest.fixture
def registry():
    """ An isolated registry, so tests never share instances through the
        process-wide default.
    """

    return trapper.registry.Registry()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
