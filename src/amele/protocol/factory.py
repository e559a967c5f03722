"""Convenience constructors for protocol messages."""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import fields
from .message import CallRequest, Envelope, RespondMessage


def envelope(context: Optional[Dict[str, Any]] = None, inputs: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return Envelope(context, inputs).to_value()


def call(function: str, inputs: Optional[Dict[str, Any]] = None) -> CallRequest:
    return CallRequest(function, inputs)


def respond(context: Dict[str, Any]) -> Dict[str, Any]:
    return RespondMessage(context).to_value()


def call_result(request: Dict[str, Any], result: Any = None) -> Dict[str, Any]:
    """ Build the host's successful answer to a decoded call *request*. This
        is the host side of the exchange, used when simulating a host.
    """

    return {fields.TYPE: fields.CALL_RESULT, fields.ID: request[fields.ID], fields.RESULT: result}


def call_error(request: Dict[str, Any], error: Any) -> Dict[str, Any]:
    return {fields.TYPE: fields.CALL_RESULT, fields.ID: request[fields.ID], fields.ERROR: error}
