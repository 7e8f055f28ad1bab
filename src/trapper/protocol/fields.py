"""Protocol constants.

Keep these in one place to avoid magic numbers in the framing and
response handling.
"""

# Frame header: magic, version byte, little-endian 64-bit body length.
HEADER = b"ZBXD"
VERSION = 1
HEADER_FORMAT = "<4sBQ"
HEADER_LENGTH = 13

# Default 'request' discriminator for metric submission.
SENDER_DATA = "sender data"

# Server side.
DEFAULT_PORT = 10051
SUCCESS = "success"

# Size of the single recv() issued for the server acknowledgement.
RECEIVE_SIZE = 2048

# Serialized field names for a metric, in wire order.
HOST = "host"
KEY = "key"
VALUE = "value"
CLOCK = "clock"

# Serialized field names for a packet and a response.
REQUEST = "request"
DATA = "data"
RESPONSE = "response"
INFO = "info"
