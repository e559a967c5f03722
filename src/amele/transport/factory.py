"""Select and construct the transport for a configuration."""

from __future__ import annotations

from ..config import Configuration, Mode
from .base import Transport
from .detached import DetachedTransport
from .files import FileTransport
from .tcp import TcpTransport


def create(configuration: Configuration) -> Transport:
    """Return an unopened :class:`Transport` matching the configured mode."""

    mode = configuration.mode

    if mode is Mode.TCP:
        return TcpTransport(configuration)

    if mode is Mode.FILES:
        return FileTransport(configuration.inbox, configuration.outbox)

    return DetachedTransport()
