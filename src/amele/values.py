""" Helpers for the dynamically-typed value tree exchanged with the host.
    Decoded payloads are plain Python values: None, bool, int, float, str,
    bytes, list and dict. These helpers check the shape of such a value
    before the rest of the package relies on it.
"""

from __future__ import annotations

from typing import Any, Dict

from .errors import ConversionError


def kind(value: Any) -> str:
    """ Return the name of the variant *value* belongs to: one of 'null',
        'bool', 'number', 'string', 'binary', 'sequence' or 'mapping'.
    """

    if value is None:
        return 'null'

    # bool is a subclass of int, check it first.

    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (bytes, bytearray)):
        return 'binary'
    if isinstance(value, (list, tuple)):
        return 'sequence'
    if isinstance(value, dict):
        return 'mapping'

    raise ConversionError('not a payload value: ' + type(value).__name__)


def as_mapping(value: Any) -> Dict[str, Any]:
    """ Return *value* as a dictionary with string keys. The returned
        dictionary is a shallow copy; a :class:`ConversionError` is raised
        if *value* is not a mapping, or if any of its keys is not a string.
    """

    if not isinstance(value, dict):
        raise ConversionError('expected a mapping, got ' + kind(value))

    for key in value:
        if not isinstance(key, str):
            raise ConversionError('mapping keys must be strings, got %r' % (key,))

    return dict(value)


def as_string(value: Any) -> str:

    if not isinstance(value, str):
        raise ConversionError('expected a string, got ' + kind(value))

    return value


def mapping_or_empty(value: Any) -> Dict[str, Any]:
    """ Best-effort variant of :func:`as_mapping`: anything that cannot be
        interpreted as a mapping, including None, becomes an empty dictionary.
    """

    try:
        return as_mapping(value)
    except ConversionError:
        return dict()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
