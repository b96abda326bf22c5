"""Query string and path encoding for CouchDB requests.

CouchDB expects some query parameters as JSON literals (compound keys, key
lists) and the rest in their plain textual form:

>>> encode_options({'startkey': ['a', 'b']}, VIEW_JSON_KEYS)
'startkey=%5B%22a%22%2C%22b%22%5D'
>>> encode_options({'limit': 10})
'limit=10'
"""
import json
import math
from decimal import Decimal
from numbers import Integral

from requests.compat import quote, quote_plus

from ctxcouch import exceptions

__all__ = ['GET_JSON_KEYS', 'VIEW_JSON_KEYS', 'encode_options', 'path', 'revpath', 'optpath']


#: Document fetch options sent as JSON.
GET_JSON_KEYS = ('open_revs', 'atts_since')

#: View and ``_all_docs`` options sent as JSON.
VIEW_JSON_KEYS = ('startkey', 'start_key', 'key', 'endkey', 'end_key', 'keys')

_SLASHED_PREFIXES = ('_design/', '_local/')


def encode_options(options, json_keys=()):
    """Encode a mapping of query options into a query string.

    Values of keys in `json_keys` are sent as JSON; every other value must be
    a string, boolean, integer or float.

    :param options: mapping of option names to values
    :param json_keys: names of the options to JSON-encode
    :return: the query string, without a leading ``?``; empty for no options
    :raise EncodingError: for ``None`` values or unsupported types
    """
    pairs = []
    for key, value in options.items():
        if value is None:
            raise exceptions.EncodingError('invalid option %r: value is None' % (key,))
        if key in json_keys:
            try:
                text = json.dumps(value, separators=(',', ':'), allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise exceptions.EncodingError('invalid option %r: %s' % (key, exc)) from exc
        else:
            text = _encode_value(key, value)
        pairs.append(quote_plus(str(key)) + '=' + quote_plus(text))
    return '&'.join(pairs)


def _encode_value(key, value):
    if isinstance(value, str):
        return value
    # bool is an Integral too, so it goes first
    elif isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, Integral):
        return str(int(value))
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise exceptions.EncodingError('invalid option %r: %r is not finite' % (key, value))
        return format(Decimal(repr(value)).normalize(), 'f')
    raise exceptions.EncodingError('invalid option %r: unsupported type: %s' % (key, type(value).__name__))


def _quote_segment(segment):
    for prefix in _SLASHED_PREFIXES:
        if segment.startswith(prefix):
            return prefix + quote(segment[len(prefix):], safe='')
    return quote(segment, safe='')


def path(*segments):
    """Build an escaped request path from its segments.

    >>> path('db', '_design/test')
    '/db/_design/test'
    >>> path('my db', 'a/b')
    '/my%20db/a%2Fb'
    """
    return ''.join('/' + _quote_segment(segment) for segment in segments)


def revpath(rev, *segments):
    """Like `path`, with a ``rev`` query parameter when `rev` is not empty."""
    result = path(*segments)
    if rev:
        result += '?rev=' + quote_plus(rev)
    return result


def optpath(options, json_keys, *segments):
    """Like `path`, with the encoded `options` as query string."""
    result = path(*segments)
    if options:
        result += '?' + encode_options(options, json_keys)
    return result
