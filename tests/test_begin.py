""" The module-level functions share one session per process.
"""

import msgpack
import pytest

import amele
from amele.protocol import factory


def test_same_session():

    assert amele.begin.session() is amele.begin.session()

    first = amele.begin.reset()
    assert first is not None
    assert amele.begin.reset() is None
    assert amele.begin.session() is not first


def test_context_without_accept():

    assert amele.context() == {}
    assert amele.begin._session is None


def test_detached():

    assert amele.accept() == {}
    assert amele.context() == {}

    with pytest.raises(amele.UnsupportedOperation):
        amele.call_function('f', {})


def test_files(files):

    inbox, outbox = files
    inbox.write_bytes(msgpack.packb({'context': {'a': 1}, 'inputs': {'b': 2}}))

    assert amele.accept() == {'b': 2}
    assert amele.context() == {'a': 1}

    with pytest.raises(amele.UnsupportedOperation):
        amele.call_function('f', {})

    amele.respond({'a': 2})
    assert msgpack.unpackb(outbox.read_bytes(), raw=False) == {'a': 2}


def test_tcp(host):

    def handler(message):
        if message['type'] == 'call':
            return factory.call_result(message, {'x': 1})

    fake = host({'context': {'a': 1}, 'inputs': {'b': 2}}, handler)

    with pytest.raises(amele.NotInitialized):
        amele.call_function('f', {})

    assert amele.accept() == {'b': 2}
    assert amele.context() == {'a': 1}
    assert amele.call_function('f', {}) == {'x': 1}

    with pytest.raises(amele.AlreadyInitialized):
        amele.accept()

    amele.respond({'a': 2})
    amele.begin.reset()
    fake.stop()

    assert fake.received[-1] == {'type': 'respond', 'context': {'a': 2}}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
