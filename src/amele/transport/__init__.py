"""Transport layer implementations."""

from ..errors import (
    CodecError,
    IoError,
    TransportError,
    TransportConnectionError,
)

from . import codec
from .base import Transport
from .detached import DetachedTransport
from .files import FileTransport
from .tcp import TcpTransport
from .factory import create
from .session import Session, State
