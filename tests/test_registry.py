import threading
import time
import trapper


def test_same_instance(registry):

    first = registry.get('alpha')
    second = registry.get('alpha')

    assert first is second
    assert 'alpha' in registry
    assert len(registry) == 1


def test_default_name(registry):

    assert registry.get() is registry.get('default')


def test_independent_instances(registry):

    alpha = registry.get('alpha')
    beta = registry.get('beta')

    assert alpha is not beta

    alpha.configure(server_address='alpha.example.com', disable=True)

    assert beta.server_address is None
    assert beta.disabled == False


def test_clear(registry):

    first = registry.get('alpha')

    assert registry.clear('missing') is None
    assert registry.clear('alpha') is first
    assert 'alpha' not in registry

    second = registry.get('alpha')
    assert second is not first

    registry.get('beta')
    assert registry.clear() is None
    assert len(registry) == 0


def test_factory():

    names = list()

    def factory(name):
        names.append(name)
        return trapper.Sender('%s.example.com' % (name))

    registry = trapper.registry.Registry(factory)

    sender = registry.get('zabbix')
    registry.get('zabbix')

    assert sender.server_address == 'zabbix.example.com'
    assert names == ['zabbix']


def test_factory_can_use_registry():
    """ A factory may retrieve other instances from the same registry
        while it runs.
    """

    def factory(name):
        if name == 'secondary':
            primary = registry.get('primary')
            return trapper.Sender(primary.server_address, primary.server_port + 1)
        return trapper.Sender('zabbix.example.com')

    registry = trapper.registry.Registry(factory)

    secondary = registry.get('secondary')

    assert secondary.server_address == 'zabbix.example.com'
    assert secondary.server_port == 10052
    assert 'primary' in registry
    assert 'secondary' in registry


def test_environment(monkeypatch, registry):

    monkeypatch.setenv('TRAPPER_SERVER_ADDRESS', 'env.example.com')
    monkeypatch.setenv('TRAPPER_SERVER_PORT', '10099')
    monkeypatch.setenv('TRAPPER_DISABLE', 'true')

    sender = registry.get('from-env')

    assert sender.server_address == 'env.example.com'
    assert sender.server_port == 10099
    assert sender.disabled == True


def test_concurrent_creation():
    """ Racing first calls for the same name must all receive the same
        instance, and the factory must only run once.
    """

    calls = list()

    def slow_factory(name):
        calls.append(name)
        time.sleep(0.05)
        return trapper.Sender()

    registry = trapper.registry.Registry(slow_factory)
    results = list()

    def get():
        results.append(registry.get('shared'))

    threads = [threading.Thread(target=get) for number in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == ['shared']
    assert len(results) == 10
    assert all(result is results[0] for result in results)


def test_module_level():

    name = 'test_module_level'

    try:
        sender = trapper.get(name)
        assert trapper.Sender.instance(name) is sender
        assert trapper.registry.default.get(name) is sender
    finally:
        trapper.registry.clear(name)

    assert name not in trapper.registry.default


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
