"""Transport codec: payload values <-> msgpack bytes."""

from __future__ import annotations

from typing import Any

import msgpack
from msgpack.exceptions import OutOfData, UnpackException

from ..errors import CodecError


# Anything msgpack raises while decoding untrusted bytes. FormatError,
# StackError and ExtraData are ValueError subclasses; TypeError covers
# unhashable map keys. Non-string keys are let through so that the message
# layer can decide what to do with them.

_decode_errors = (ValueError, TypeError, UnpackException)


def encode(value: Any) -> bytes:

    try:
        return msgpack.packb(value, use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise CodecError('cannot encode value: ' + str(e)) from e


def decode(data: bytes) -> Any:
    """ Decode exactly one value from *data*. Truncated, corrupt or trailing
        bytes all raise :class:`CodecError`.
    """

    if not data:
        raise CodecError('cannot decode an empty buffer')

    try:
        return msgpack.unpackb(data, raw=False, strict_map_key=False)
    except _decode_errors as e:
        raise CodecError('cannot decode value: ' + str(e)) from e


class StreamDecoder:
    """ Incremental decoder for a byte stream carrying back-to-back values
        with no framing. Bytes are handed to :func:`feed` as they arrive;
        :func:`next` returns the next complete value, or raises
        :class:`NeedMoreData` if the buffered bytes do not hold one yet.
    """

    def __init__(self):
        self._unpacker = msgpack.Unpacker(raw=False, strict_map_key=False)


    def feed(self, data: bytes) -> None:

        try:
            self._unpacker.feed(data)
        except _decode_errors as e:
            raise CodecError('cannot buffer stream data: ' + str(e)) from e


    def next(self) -> Any:

        try:
            return self._unpacker.unpack()
        except OutOfData:
            raise NeedMoreData() from None
        except _decode_errors as e:
            raise CodecError('cannot decode stream value: ' + str(e)) from e


class NeedMoreData(Exception):
    """Internal signal from :class:`StreamDecoder`; not an error."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
