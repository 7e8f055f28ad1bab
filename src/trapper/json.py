''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps` for trapper
    packets and server responses.
'''

# msgspec is a declared dependency and is the expected choice; the other
# libraries are only reached in an environment where it was removed.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well. The standard
# library is asked for compact separators so that the frame body looks the
# same regardless of which encoder produced it.

def json_dumps(value):
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


# DecodeError is the set of exceptions the selected 'loads' raises when it
# is handed something that is not a JSON document.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = (msgspec.DecodeError, ValueError)
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = (orjson.JSONDecodeError,)
else:
    dumps = json_dumps
    loads = json.loads
    DecodeError = (json.JSONDecodeError,)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
