""" Environment-sourced configuration. The host process describes the
    communication channel entirely through environment variables; this
    module is the only place that reads them.
"""

from __future__ import annotations

import enum
import os
from typing import Mapping, Optional, Tuple

from .errors import InvalidConfig, MissingConfig


PROTOCOL = 'COMMUNICATION_PROTOCOL'
TCP_PORT = 'AMELE_TCP_PORT'
INBOX_FILE = 'AMELE_INBOX_FILE'
OUTBOX_FILE = 'AMELE_OUTBOX_FILE'

address = '127.0.0.1'


class Mode(enum.Enum):
    TCP = 'tcp'
    FILES = 'files'
    DETACHED = 'detached'


class Configuration:
    """ A snapshot of the communication settings. Values are kept exactly
        as they appeared in the environment; interpretation (and any
        resulting error) is deferred until a value is actually needed, so
        that a missing port only matters in socket mode, and a missing
        outbox only matters when a response is written.
    """

    def __init__(self, protocol: Optional[str] = None, port: Optional[str] = None,
                 inbox: Optional[str] = None, outbox: Optional[str] = None):

        self.protocol = protocol
        self.port = port
        self.inbox = inbox
        self.outbox = outbox


    def __repr__(self):
        return '%s(mode=%s, port=%r, inbox=%r, outbox=%r)' % (
                self.__class__.__name__, self.mode.value,
                self.port, self.inbox, self.outbox)


    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'Configuration':
        """ Build a :class:`Configuration` from *environ*, which defaults to
            :data:`os.environ`. Empty values are treated as absent.
        """

        if environ is None:
            environ = os.environ

        values = list()
        for name in (PROTOCOL, TCP_PORT, INBOX_FILE, OUTBOX_FILE):
            value = environ.get(name)
            if value == '':
                value = None
            values.append(value)

        return cls(*values)


    @property
    def mode(self) -> Mode:

        if self.protocol == Mode.TCP.value:
            return Mode.TCP

        if self.inbox is None and self.outbox is None:
            return Mode.DETACHED

        return Mode.FILES


    def tcp_address(self) -> Tuple[str, int]:
        """ Return the (address, port) tuple for socket mode. The port is
            required; the address is always the local loopback.
        """

        if self.port is None:
            raise MissingConfig(TCP_PORT + ' is not set')

        try:
            port = int(self.port)
        except ValueError:
            raise InvalidConfig('%s is not an integer: %r' % (TCP_PORT, self.port)) from None

        if port < 1 or port > 65535:
            raise InvalidConfig('%s is out of range: %d' % (TCP_PORT, port))

        return (address, port)


    def outbox_path(self) -> str:

        if self.outbox is None:
            raise MissingConfig(OUTBOX_FILE + ' is not set')

        return self.outbox


def get(environ: Optional[Mapping[str, str]] = None) -> Configuration:
    return Configuration.from_environ(environ)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
