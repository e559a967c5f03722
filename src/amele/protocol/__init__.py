from . import fields
from . import message
from . import factory


"""
amele Protocol Layer
====================

This package defines the messages exchanged between a guest function and
its host process. It knows the shape and meaning of each message, nothing
about how bytes move.

The protocol layer MUST NOT depend on any transport implementation
(socket, file pair, etc).

---------------------------------------------------------------------

Session Overview
----------------

Host                                    Guest
    │                                       │
    │  Envelope {context, inputs}           │
    │ ────────────────────────────────────► │   accept()
    │                                       │
    │  {type: call, function, inputs, id}   │
    │ ◄──────────────────────────────────── │   call_function()
    │  {type: call_result, id, result}      │   (zero or more,
    │ ────────────────────────────────────► │    socket mode only)
    │                                       │
    │  {type: respond, context}             │
    │ ◄──────────────────────────────────── │   respond()

In file-pair mode the envelope is read from the inbox file and the bare
context mapping is written to the outbox file; there are no calls.

---------------------------------------------------------------------

Layers
------

Message Model (message.py)
    Envelope, CallRequest, CallResponse, RespondMessage
    Shape checks and correlation

Constructors (factory.py)
    Shortcuts for building messages, including the host-side replies
    used when simulating a host

Field Vocabulary (fields.py)
    Canonical names for message keys and types

Below the Protocol Layer (amele.transport)
    Session  -> executes accept / call / respond
    Codec    -> value <-> msgpack bytes
    Transport-> moves bytes (socket, file pair)

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
