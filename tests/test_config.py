import pytest

import amele
from amele import config
from amele.config import Configuration, Mode


def test_modes():

    assert Configuration.from_environ({}).mode is Mode.DETACHED
    assert Configuration.from_environ({'COMMUNICATION_PROTOCOL': 'tcp'}).mode is Mode.TCP

    # Anything other than 'tcp' is file-pair mode, provided there is at
    # least one file to work with.

    for protocol in (None, 'shmem', 'TCP', ''):
        environ = {'AMELE_OUTBOX_FILE': '/tmp/outbox'}
        if protocol is not None:
            environ['COMMUNICATION_PROTOCOL'] = protocol
        assert Configuration.from_environ(environ).mode is Mode.FILES

    assert Configuration.from_environ({'AMELE_INBOX_FILE': '/tmp/inbox'}).mode is Mode.FILES


def test_from_os_environ(monkeypatch):

    monkeypatch.setenv('COMMUNICATION_PROTOCOL', 'tcp')
    monkeypatch.setenv('AMELE_TCP_PORT', '10123')

    configuration = config.get()
    assert configuration.mode is Mode.TCP
    assert configuration.tcp_address() == ('127.0.0.1', 10123)


def test_empty_values_are_absent():

    configuration = Configuration.from_environ({'AMELE_INBOX_FILE': '', 'AMELE_OUTBOX_FILE': ''})
    assert configuration.inbox is None
    assert configuration.outbox is None
    assert configuration.mode is Mode.DETACHED


def test_tcp_address():

    with pytest.raises(amele.MissingConfig):
        Configuration(protocol='tcp').tcp_address()

    for bad in ('port', '0', '65536', '-4'):
        with pytest.raises(amele.InvalidConfig):
            Configuration(protocol='tcp', port=bad).tcp_address()

        # An unusable port is still a configuration problem.

        with pytest.raises(amele.MissingConfig):
            Configuration(protocol='tcp', port=bad).tcp_address()


def test_outbox_path():

    with pytest.raises(amele.MissingConfig):
        Configuration().outbox_path()

    assert Configuration(outbox='/tmp/outbox').outbox_path() == '/tmp/outbox'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
