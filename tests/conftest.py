import socket
import threading

import msgpack
import pytest

import amele


environment = ('COMMUNICATION_PROTOCOL', 'AMELE_TCP_PORT', 'AMELE_INBOX_FILE', 'AMELE_OUTBOX_FILE')

# Returned by a FakeHost handler to drop the connection.
disconnect = object()


class FakeHost:
    """ A stand-in for the host process. It listens on the loopback, sends
        *envelope* to the first guest that connects (raw bytes are sent
        as-is, anything else is msgpack-encoded), and then records every
        message the guest sends. If a *handler* is supplied, it is invoked
        with each received message; whatever it returns, other than None,
        is sent back to the guest, except for the *disconnect* marker, which
        makes the host hang up. With *hangup* set, the host closes the
        connection as soon as the envelope is sent.
    """

    def __init__(self, envelope=None, handler=None, hangup=False):

        self.envelope = envelope
        self.hangup = hangup
        self.handler = handler
        self.received = list()
        self.connected = threading.Event()

        self.listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.listener.bind(('127.0.0.1', 0))
        self.listener.listen(1)
        self.port = self.listener.getsockname()[1]

        self.thread = threading.Thread(target=self.run, daemon=True)
        self.thread.start()


    def send(self, connection, value):

        if not isinstance(value, bytes):
            value = msgpack.packb(value, use_bin_type=True)

        connection.sendall(value)


    def run(self):

        try:
            connection, _address = self.listener.accept()
        except OSError:
            return

        self.connected.set()
        unpacker = msgpack.Unpacker(raw=False)

        with connection:
            if self.envelope is not None:
                self.send(connection, self.envelope)

            if self.hangup:
                return

            while True:
                chunk = connection.recv(65536)
                if chunk == b'':
                    break

                unpacker.feed(chunk)
                for message in unpacker:
                    self.received.append(message)
                    if self.handler is None:
                        continue

                    reply = self.handler(message)
                    if reply is disconnect:
                        return
                    if reply is not None:
                        self.send(connection, reply)


    def stop(self):

        # A guest that connected must close its end before the host thread
        # can finish; one that never connected leaves the thread blocked in
        # accept(), where it is abandoned.

        if self.connected.is_set():
            self.thread.join(5)
        self.listener.close()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):

    for name in environment:
        monkeypatch.delenv(name, raising=False)

    amele.begin.reset()
    yield
    amele.begin.reset()


@pytest.fixture
def host(monkeypatch):
    """ Factory fixture: start a :class:`FakeHost` and point the socket-mode
        environment variables at it. Sessions created through the returned
        host's *session* helper are closed, and the host stopped, at the
        end of the test.
    """

    hosts = list()
    sessions = list()

    def start(envelope=None, handler=None, hangup=False):
        fake = FakeHost(envelope, handler, hangup)
        hosts.append(fake)

        monkeypatch.setenv('COMMUNICATION_PROTOCOL', 'tcp')
        monkeypatch.setenv('AMELE_TCP_PORT', str(fake.port))

        def session():
            new = amele.Session()
            sessions.append(new)
            return new

        fake.session = session
        return fake

    yield start

    for session in sessions:
        session.close()

    amele.begin.reset()

    for fake in hosts:
        fake.stop()


@pytest.fixture
def files(tmp_path, monkeypatch):
    """ Point the file-pair environment variables at an inbox and an outbox
        in a temporary directory. The inbox is not created; tests write
        whatever they need into it. Returns the (inbox, outbox) paths.
    """

    inbox = tmp_path / 'inbox.msgpack'
    outbox = tmp_path / 'outbox.msgpack'

    monkeypatch.setenv('COMMUNICATION_PROTOCOL', 'shmem')
    monkeypatch.setenv('AMELE_INBOX_FILE', str(inbox))
    monkeypatch.setenv('AMELE_OUTBOX_FILE', str(outbox))

    return inbox, outbox


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
