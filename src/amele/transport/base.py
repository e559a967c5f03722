""" The contract shared by the socket, file-pair and detached transports.
    A transport moves whole decoded values; the session layer above it
    decides which values to send and what the replies mean.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..config import Mode


class Transport(ABC):
    """ Minimal contract for moving one decoded value at a time between the
        guest and the host. Encoding happens inside the transport so that a
        stream transport can decode incrementally.
    """

    mode: Mode

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection, if any."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection, if any."""

    @abstractmethod
    def read(self) -> Any:
        """ Return the next decoded value from the host. Only meaningful
            if :attr:`available` is True.
        """

    @abstractmethod
    def write(self, value: Any) -> None:
        """Encode and deliver one value to the host."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False

    @property
    def available(self) -> bool:
        """Whether the host has anything to deliver through this transport."""
        return True


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
