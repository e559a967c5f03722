""" Implementation of the top-level :func:`accept`, :func:`context`,
    :func:`call_function` and :func:`respond` functions. These are the
    principal entry points for a guest function: the host runs one guest
    per process, so a single :class:`Session` per process is all that is
    ever needed, and these functions create and reuse it on demand.

    Code that wants more control, such as tests simulating several
    sessions, should construct :class:`amele.Session` instances directly.
"""

import threading

from .transport.session import Session


_session = None
_session_lock = threading.Lock()


def session():
    """ Return the process-wide :class:`Session`, creating it from the
        current environment if necessary. Every call returns the same
        instance until :func:`reset` is called.
    """

    global _session

    with _session_lock:
        if _session is None:
            _session = Session()
        return _session


def reset():
    """ Discard the process-wide :class:`Session`, closing its transport.
        Returns the discarded instance, or None if there was none.
    """

    global _session

    with _session_lock:
        existing = _session
        _session = None

    if existing is not None:
        existing.close()

    return existing


def accept():
    """ Receive the envelope from the host, and return its inputs. See
        :func:`Session.accept`.
    """

    return session().accept()


def context():
    """ Return a copy of the context received by :func:`accept`. Never
        fails; the context is empty if :func:`accept` has not been called.
    """

    with _session_lock:
        current = _session

    if current is None:
        return dict()

    return current.context()


def call_function(function_name, inputs=None):
    return session().call_function(function_name, inputs)


def respond(context):
    return session().respond(context)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
