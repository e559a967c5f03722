""" Class representations of the four messages exchanged with the host.
    These classes deal only in decoded values (dictionaries, lists, strings
    and so on); turning them into bytes is the job of the codec in
    :mod:`amele.transport.codec`.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from .. import values
from ..errors import CodecError, ConversionError, ProtocolViolation, RemoteError
from . import fields


log = logging.getLogger(__name__)


def _id_next() -> str:
    """ Return a fresh correlation token. Tokens are random rather than
        sequential; nothing about them is persisted.
    """

    return str(uuid.uuid4())


class Envelope:
    """ The single message delivered by the host at the start of a session.
        Both the *context* and the *inputs* are dictionaries; either may be
        empty.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None, inputs: Optional[Dict[str, Any]] = None):

        if context is None:
            context = dict()
        if inputs is None:
            inputs = dict()

        self.context = context
        self.inputs = inputs


    def __repr__(self):
        return 'Envelope(context=%r, inputs=%r)' % (self.context, self.inputs)


    @classmethod
    def from_value(cls, value: Any) -> 'Envelope':
        """ Interpret a decoded *value* as an :class:`Envelope`. The value
            itself must be a mapping, otherwise a :class:`CodecError` is
            raised. The 'context' and 'inputs' fields are extracted
            independently of one another; a field that is absent or is not
            a mapping is replaced with an empty dictionary.
        """

        try:
            envelope = values.as_mapping(value)
        except ConversionError as e:
            raise CodecError('envelope: ' + str(e)) from e

        context = cls._extract(envelope, fields.CONTEXT)
        inputs = cls._extract(envelope, fields.INPUTS)

        return cls(context, inputs)


    @staticmethod
    def _extract(envelope: Dict[str, Any], field: str) -> Dict[str, Any]:

        try:
            raw = envelope[field]
        except KeyError:
            return dict()

        extracted = values.mapping_or_empty(raw)

        if not extracted and raw != {}:
            log.warning("envelope field %r ignored: not a string-keyed mapping (%s)", field, type(raw).__name__)

        return extracted


    def to_value(self) -> Dict[str, Any]:
        return {fields.CONTEXT: self.context, fields.INPUTS: self.inputs}


class CallRequest:
    """ A synchronous remote function call. The *id* is generated if not
        supplied; it is the only thing tying the eventual
        :class:`CallResponse` to this request.
    """

    def __init__(self, function: str, inputs: Optional[Dict[str, Any]] = None, id: Optional[str] = None):

        if id is None:
            id = _id_next()
        if inputs is None:
            inputs = dict()

        self.function = values.as_string(function)
        self.inputs = values.as_mapping(inputs)
        self.id = id


    def __repr__(self):
        return 'CallRequest(function=%r, id=%r)' % (self.function, self.id)


    def to_value(self) -> Dict[str, Any]:

        request = dict()
        request[fields.TYPE] = fields.CALL
        request[fields.FUNCTION] = self.function
        request[fields.INPUTS] = self.inputs
        request[fields.ID] = self.id

        return request


class CallResponse:
    """ The host's answer to a :class:`CallRequest`. Instances are only
        created via :func:`match`, which rejects anything that is not a
        'call_result' carrying the expected id.
    """

    def __init__(self, id: str, result: Any = None, error: Any = None, has_error: bool = False):
        self.id = id
        self.result = result
        self.error = error
        self.has_error = has_error


    @classmethod
    def match(cls, value: Any, request: CallRequest) -> 'CallResponse':

        if not isinstance(value, dict):
            raise ProtocolViolation('unexpected response: %r' % (value,), value)

        if value.get(fields.TYPE) != fields.CALL_RESULT or value.get(fields.ID) != request.id:
            raise ProtocolViolation('unexpected response: %r' % (value,), value)

        has_error = fields.ERROR in value

        return cls(request.id, value.get(fields.RESULT), value.get(fields.ERROR), has_error)


    def unwrap(self) -> Dict[str, Any]:
        """ Return the result as a dictionary, or raise :class:`RemoteError`
            if the host reported an error. A missing result is an empty
            dictionary; a result that is not a mapping is a protocol
            violation.
        """

        if self.has_error:
            error = self.error
            if not isinstance(error, str):
                error = fields.UNKNOWN_ERROR
            raise RemoteError(error)

        if self.result is None:
            return dict()

        try:
            return values.as_mapping(self.result)
        except ConversionError as e:
            raise ProtocolViolation('call result: ' + str(e), self.result) from e


class RespondMessage:
    """The terminal message of a socket-mode session."""

    def __init__(self, context: Dict[str, Any]):
        self.context = values.as_mapping(context)


    def to_value(self) -> Dict[str, Any]:
        return {fields.TYPE: fields.RESPOND, fields.CONTEXT: self.context}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
