""" Transport used when no communication channel is configured at all,
    for instance when a guest is run by hand for testing. Nothing is ever
    received, and there is nowhere to send anything.
"""

from __future__ import annotations

from typing import Any

from ..config import INBOX_FILE, OUTBOX_FILE, Mode
from ..errors import MissingConfig
from .base import Transport


class DetachedTransport(Transport):

    mode = Mode.DETACHED

    def __repr__(self):
        return 'DetachedTransport()'

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def available(self) -> bool:
        return False

    def read(self) -> Any:
        raise MissingConfig(INBOX_FILE + ' is not set')

    def write(self, value: Any) -> None:
        raise MissingConfig(OUTBOX_FILE + ' is not set')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
