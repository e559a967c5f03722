""" Exception classes raised by :mod:`amele`. Everything raised on purpose
    by this package derives from :class:`Error`, so a caller that only
    cares whether the session failed can catch that one class.
"""


class Error(Exception):
    """Base class for all amele errors."""


# Configuration

class MissingConfig(Error):
    """A required environment value is absent."""


class InvalidConfig(MissingConfig):
    """ An environment value is present but unusable. Handled like an
        absent value by anyone catching :class:`MissingConfig`.
    """


# Transport and codec

class TransportError(Error):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class IoError(TransportError):
    """A file-pair transport could not read or write its file."""


class CodecError(Error):
    """A top-level payload could not be encoded or decoded."""


# Session state

class NotInitialized(Error):
    """The operation needs a transport that was never established."""


class AlreadyInitialized(Error):
    """The session has already completed its handshake."""


class UnsupportedOperation(Error):
    """The operation is not available in the configured mode."""


# Protocol

class ProtocolViolation(Error):
    """ The host sent something other than the expected response. The raw
        decoded value is kept as :attr:`value` for inspection.
    """

    def __init__(self, message, value=None):
        Error.__init__(self, message)
        self.value = value


class RemoteError(Error):
    """ The host reported an application-level failure for a remote call.
        :attr:`message` is the text reported by the host.
    """

    def __init__(self, message):
        Error.__init__(self, message)
        self.message = message


class ConversionError(Error):
    """A dynamically-typed value does not have the requested shape."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
