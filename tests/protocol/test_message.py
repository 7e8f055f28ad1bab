import pytest
import socket
import time
import trapper


def test_metric_defaults():

    start = int(time.time())
    metric = trapper.Metric('system.cpu.load', '0.75')
    stop = int(time.time())

    assert metric.key == 'system.cpu.load'
    assert metric.value == '0.75'
    assert metric.host == socket.gethostname()
    assert start <= metric.clock <= stop
    assert isinstance(metric.clock, int)


def test_metric_overrides():

    metric = trapper.Metric('key', 'value')
    original_clock = metric.clock

    returned = metric.with_hostname('web01')
    assert returned is metric
    assert metric.host == 'web01'
    assert metric.clock == original_clock
    assert metric.key == 'key'
    assert metric.value == 'value'

    returned = metric.with_timestamp(1500000000)
    assert returned is metric
    assert metric.clock == 1500000000
    assert metric.host == 'web01'


def test_metric_value_as_string():

    for value, expected in ((42, '42'), (35.5, '35.5'), ('text', 'text'), (True, 'True')):
        metric = trapper.Metric('key', value)
        assert metric.value == expected


def test_metric_requires_key():

    with pytest.raises(ValueError):
        trapper.Metric('', 'value')

    for key in (None, 0, False, b'key'):
        with pytest.raises(TypeError):
            trapper.Metric(key, 'value')


def test_metric_requires_value():

    with pytest.raises(TypeError):
        trapper.Metric('key', None)

    # Falsy values that are not None are still values.

    assert trapper.Metric('key', 0).value == '0'
    assert trapper.Metric('key', '').value == ''


def test_metric_dict():

    metric = trapper.Metric('key', 'value').with_hostname('host').with_timestamp(10)
    as_dict = metric.to_dict()

    assert as_dict == {'host': 'host', 'key': 'key', 'value': 'value', 'clock': 10}
    assert list(as_dict.keys()) == ['host', 'key', 'value', 'clock']


def test_empty_packet():

    packet = trapper.Packet()
    assert packet.request == 'sender data'
    assert len(packet) == 0
    assert packet.get_packet() == {'request': 'sender data'}


def test_custom_request():

    packet = trapper.Packet('agent data')
    assert packet.get_packet()['request'] == 'agent data'


def test_packet_order():

    packet = trapper.Packet()
    for number in range(5):
        metric = trapper.Metric('key.%d' % (number), number).with_hostname('h').with_timestamp(number)
        returned = packet.add_metric(metric)
        assert returned is packet

    assert len(packet) == 5
    assert [metric.key for metric in packet] == ['key.0', 'key.1', 'key.2', 'key.3', 'key.4']

    structured = packet.get_packet()
    assert list(structured.keys()) == ['request', 'data']
    assert [item['key'] for item in structured['data']] == ['key.0', 'key.1', 'key.2', 'key.3', 'key.4']


def test_packet_rejects_other_types():

    packet = trapper.Packet()

    with pytest.raises(TypeError):
        packet.add_metric({'key': 'k', 'value': 'v'})


def test_encapsulate():

    packet = trapper.Packet()
    packet.add_metric(trapper.Metric('a', '1').with_hostname('h1').with_timestamp(100))
    packet.add_metric(trapper.Metric('b', '2').with_hostname('h2').with_timestamp(200))

    encapsulated = packet.encapsulate()
    assert isinstance(encapsulated, bytes)

    decoded = trapper.json.loads(encapsulated)
    assert set(decoded.keys()) == set(('request', 'data'))
    assert decoded['request'] == 'sender data'
    assert decoded['data'] == [
        {'host': 'h1', 'key': 'a', 'value': '1', 'clock': 100},
        {'host': 'h2', 'key': 'b', 'value': '2', 'clock': 200},
    ]

    # Metrics added later show up in the next encoding.

    packet.add_metric(trapper.Metric('c', '3'))
    decoded = trapper.json.loads(packet.encapsulate())
    assert len(decoded['data']) == 3


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
