""" Socket-mode transport: a single persistent TCP connection to the host
    on the local loopback. Values travel back to back on the stream with
    no framing beyond the msgpack encoding itself.
"""

from __future__ import annotations

import logging
import socket
from typing import Any, Optional, Tuple

from ..config import Configuration, Mode
from ..errors import TransportConnectionError, TransportError
from . import codec
from .base import Transport


log = logging.getLogger(__name__)

read_size = 65536


class TcpTransport(Transport):
    """ Connect to the host on the port named by *configuration*. The port
        is only looked up, and the connection only made, by :func:`open`.
        There is no timeout: a host that never answers blocks the caller.
    """

    mode = Mode.TCP

    def __init__(self, configuration: Configuration):
        self.configuration = configuration
        self.address: Optional[Tuple[str, int]] = None
        self.socket: Optional[socket.socket] = None
        self._decoder = codec.StreamDecoder()


    def __repr__(self):
        return 'TcpTransport(port=%r)' % (self.configuration.port)


    def open(self) -> None:

        if self.socket is not None:
            return

        self.address = self.configuration.tcp_address()

        try:
            self.socket = socket.create_connection(self.address)
        except OSError as e:
            raise TransportConnectionError('cannot connect to %s:%d: %s' % (self.address + (e,))) from e

        log.debug("connected to %s:%d", *self.address)


    def close(self) -> None:

        sock = self.socket
        if sock is None:
            return

        self.socket = None
        try:
            sock.close()
        except OSError:
            pass


    @property
    def is_open(self) -> bool:
        return self.socket is not None


    def _socket(self) -> socket.socket:

        if self.socket is None:
            raise TransportConnectionError('not connected to the host')

        return self.socket


    def read(self) -> Any:
        """ Block until one complete value has arrived on the stream, and
            return it. Bytes beyond that value stay buffered for the next
            call.
        """

        sock = self._socket()

        while True:
            try:
                return self._decoder.next()
            except codec.NeedMoreData:
                pass

            try:
                chunk = sock.recv(read_size)
            except ConnectionError as e:
                raise TransportConnectionError('connection lost: ' + str(e)) from e
            except OSError as e:
                raise TransportError('read failed: ' + str(e)) from e

            if chunk == b'':
                raise TransportConnectionError('connection closed by host')

            self._decoder.feed(chunk)


    def write(self, value: Any) -> None:

        sock = self._socket()
        data = codec.encode(value)

        try:
            sock.sendall(data)
        except ConnectionError as e:
            raise TransportConnectionError('connection lost: ' + str(e)) from e
        except OSError as e:
            raise TransportError('write failed: ' + str(e)) from e


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
