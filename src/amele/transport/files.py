""" File-pair transport. The host leaves the envelope in an inbox file
    before the guest starts, and collects the final context from an outbox
    file after the guest exits. Each file is touched exactly once.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from typing import Any, Optional

from ..config import INBOX_FILE, OUTBOX_FILE, Mode
from ..errors import IoError, MissingConfig
from . import codec
from .base import Transport


log = logging.getLogger(__name__)


def _mode(path: str) -> int:
    """ Return the permission bits the outbox at *path* should end up with:
        those of the file being replaced, if there is one, otherwise what a
        plain open() would create under the current umask. mkstemp() always
        creates its file as 0600.
    """

    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass

    umask = os.umask(0)
    os.umask(umask)

    return 0o666 & ~umask


class FileTransport(Transport):

    mode = Mode.FILES

    def __init__(self, inbox: Optional[str] = None, outbox: Optional[str] = None):
        self.inbox = inbox
        self.outbox = outbox


    def __repr__(self):
        return 'FileTransport(inbox=%r, outbox=%r)' % (self.inbox, self.outbox)


    def open(self) -> None:
        pass


    def close(self) -> None:
        pass


    @property
    def available(self) -> bool:
        return self.inbox is not None


    def read(self) -> Any:
        """Decode the entire inbox file as a single value."""

        if self.inbox is None:
            raise MissingConfig(INBOX_FILE + ' is not set')

        try:
            with open(self.inbox, 'rb') as inbox:
                data = inbox.read()
        except OSError as e:
            raise IoError('cannot read %s: %s' % (self.inbox, e)) from e

        log.debug("read %d bytes from %s", len(data), self.inbox)
        return codec.decode(data)


    def write(self, value: Any) -> None:
        """ Replace the outbox file with the encoding of *value*. The bytes
            are written to a temporary file in the same directory, which is
            then renamed over the outbox; a reader sees either the old
            contents or the new, never a partial write.
        """

        if self.outbox is None:
            raise MissingConfig(OUTBOX_FILE + ' is not set')

        data = codec.encode(value)
        directory = os.path.dirname(os.path.abspath(self.outbox))

        try:
            fd, temporary = tempfile.mkstemp(dir=directory, prefix='.outbox.')
        except OSError as e:
            raise IoError('cannot write %s: %s' % (self.outbox, e)) from e

        try:
            os.fchmod(fd, _mode(self.outbox))
            with os.fdopen(fd, 'wb') as outbox:
                outbox.write(data)
            os.replace(temporary, self.outbox)
        except OSError as e:
            try:
                os.unlink(temporary)
            except OSError:
                pass
            raise IoError('cannot write %s: %s' % (self.outbox, e)) from e

        log.debug("wrote %d bytes to %s", len(data), self.outbox)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
