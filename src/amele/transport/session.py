"""Transport-agnostic session layer.

A :class:`Session` runs the guest side of one exchange with the host:
:func:`Session.accept` receives the envelope, :func:`Session.call_function`
performs zero or more synchronous remote calls, and :func:`Session.respond`
hands the final context back.
"""

from __future__ import annotations

import copy
import enum
import logging
import threading
from typing import Any, Dict, Optional

from .. import config
from .. import values
from ..config import Configuration, Mode
from ..errors import AlreadyInitialized, NotInitialized, UnsupportedOperation
from ..protocol.message import CallRequest, CallResponse, Envelope, RespondMessage
from .base import Transport
from .factory import create


log = logging.getLogger(__name__)


class State(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    READY = 'ready'


class Session:
    """ One guest session. The *configuration* defaults to whatever is in
        the environment; the *transport* defaults to the one that
        configuration selects. Constructing a session performs no I/O.

        The transport and the stored context are each guarded by their own
        lock, so a session may be shared between threads; remote calls are
        still strictly one at a time.
    """

    def __init__(self, configuration: Optional[Configuration] = None, transport: Optional[Transport] = None):

        if configuration is None:
            configuration = config.get()
        if transport is None:
            transport = create(configuration)

        self.configuration = configuration
        self.transport = transport
        self.state = State.UNINITIALIZED

        self._context: Optional[Dict[str, Any]] = None
        self._context_lock = threading.Lock()
        self._transport_lock = threading.Lock()


    def __repr__(self):
        return '%s(%r, state=%s)' % (self.__class__.__name__, self.transport, self.state.value)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    @property
    def mode(self) -> Mode:
        return self.transport.mode


    def accept(self) -> Dict[str, Any]:
        """ Perform the handshake: open the transport, receive the envelope,
            store its context, and return its inputs. Both default to empty
            dictionaries when the host supplies nothing. A session can only
            accept once; a second call raises :class:`AlreadyInitialized`.
        """

        with self._transport_lock:
            if self.state is State.READY:
                raise AlreadyInitialized('session already accepted')

            self.transport.open()

            if self.transport.available:
                envelope = Envelope.from_value(self.transport.read())
            else:
                envelope = Envelope()

            self._set_context(envelope.context)
            self.state = State.READY

        log.debug("accepted envelope: context keys %s, input keys %s",
                  sorted(envelope.context), sorted(envelope.inputs))

        return envelope.inputs


    def _set_context(self, context: Dict[str, Any]) -> None:

        # First writer wins.

        with self._context_lock:
            if self._context is None:
                self._context = context


    def context(self) -> Dict[str, Any]:
        """ Return a copy of the context received during :func:`accept`, or
            an empty dictionary if there is none. Changes to the returned
            dictionary do not affect the session.
        """

        with self._context_lock:
            if self._context is None:
                return dict()
            return copy.deepcopy(self._context)


    def call_function(self, function_name: str, inputs: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """ Ask the host to run *function_name* with *inputs*, block until it
            answers, and return the result dictionary. Only available in
            socket mode, after a successful :func:`accept`.
        """

        if self.mode is not Mode.TCP:
            raise UnsupportedOperation('call_function is not supported in %s mode' % (self.mode.value))

        request = CallRequest(function_name, inputs)

        # The lock is held across both the write and the read, so that no
        # other call can slip its request in before this response arrives.

        with self._transport_lock:
            if not self.transport.is_open:
                raise NotInitialized('no connection to the host; call accept() first')

            log.debug("calling %s (id %s)", request.function, request.id)
            self.transport.write(request.to_value())
            value = self.transport.read()

        response = CallResponse.match(value, request)
        log.debug("response for %s (id %s)", request.function, request.id)

        return response.unwrap()


    def respond(self, context: Dict[str, Any]) -> None:
        """ Hand the final *context* back to the host. In socket mode this
            sends a 'respond' message over the connection established by
            :func:`accept`; in file-pair mode the bare context replaces the
            contents of the outbox file, and no prior :func:`accept` is
            needed.
        """

        context = values.as_mapping(context)

        with self._transport_lock:
            if self.mode is Mode.TCP:
                if not self.transport.is_open:
                    raise NotInitialized('no connection to the host; call accept() first')
                message = RespondMessage(context).to_value()
            else:
                message = context

            self.transport.write(message)

        log.debug("responded with context keys %s", sorted(context))


    def close(self) -> None:
        """ Close the transport. Optional: without it the connection lasts
            until the process exits.
        """

        with self._transport_lock:
            self.transport.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
