# Copyright 2013 by Rackspace Hosting, Inc.
# Copyright 2026 by the urikit authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""URI utilities.

This module provides utility functions to percent-encode and decode text,
and to split query strings and host strings into their parts. These
functions are not available directly in the `urikit` module (with the
exception of `encode_url` and `decode_url`), and so must be explicitly
imported::

    from urikit.util import uri

    name, port = uri.parse_host('example.org:8080')
"""

import re

from urikit.constants import PYPY
from urikit.util.structures import QueryParams

# NOTE(kgriffs): See also RFC 3986
_UNRESERVED = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~'

# NOTE(kgriffs): See also RFC 3986
_DELIMITERS = ":/?#[]@!$&'()*+,;="
_ALL_ALLOWED = _UNRESERVED + _DELIMITERS

_HEX_DIGITS = '0123456789ABCDEFabcdef'

# This map construction is based on urllib's implementation
_HEX_TO_BYTE = {
    (a + b).encode(): bytes([int(a + b, 16)]) for a in _HEX_DIGITS for b in _HEX_DIGITS
}

_PORT_PATTERN = re.compile(r'-?[0-9]+\Z')


def _create_char_encoder(allowed_chars, plus_spaces=False):

    lookup = {}

    for code_point in range(256):
        if chr(code_point) in allowed_chars:
            encoded_char = chr(code_point)
        elif plus_spaces and code_point == 0x20:
            encoded_char = '+'
        else:
            encoded_char = '%{0:02X}'.format(code_point)

        lookup[code_point] = encoded_char

    return lookup.__getitem__


def _create_str_encoder(is_value, plus_spaces=False):

    allowed_chars = _UNRESERVED if is_value else _ALL_ALLOWED
    encode_char = _create_char_encoder(allowed_chars, plus_spaces)

    def encoder(uri):
        # PERF(kgriffs): Very fast way to check, learned from urlib.quote
        if not uri.rstrip(allowed_chars):
            return uri

        uri = uri.encode()

        # Use our map to encode each char and join the result into a new uri
        #
        # PERF(kgriffs): map() is faster than list comp or generator comp on
        # CPython 3 (tested on CPython 3.5 and 3.7). A list comprehension
        # can be faster on PyPy3, but the difference is on the order of
        # nanoseconds in that case, so we aren't going to worry about it.
        return ''.join(map(encode_char, uri))

    return encoder


encode = _create_str_encoder(False)
encode.__name__ = 'encode'
encode.__doc__ = """Encodes a full or relative URI according to RFC 3986.

RFC 3986 defines a set of "unreserved" characters as well as a
set of "reserved" characters used as delimiters. This function escapes
all other "disallowed" characters by percent-encoding them.

Args:
    uri (str): URI or part of a URI to encode.

Returns:
    str: An escaped version of `uri`, where all disallowed characters
    have been percent-encoded.

"""

encode_value = _create_str_encoder(True)
encode_value.__name__ = 'encode_value'
encode_value.__doc__ = """Encodes a value string according to RFC 3986.

Disallowed characters are percent-encoded in a way that models
``urllib.parse.quote(safe="~")``. All reserved characters are lumped
together into a single set of "delimiters", and everything in that set
is escaped.

Args:
    uri (str): URI fragment to encode. It is assumed not to cross delimiter
        boundaries, and so any reserved URI delimiter characters
        included in it will be percent-encoded.

Returns:
    str: An escaped version of `uri`, where all disallowed characters
    have been percent-encoded.

"""

encode_url = _create_str_encoder(True, plus_spaces=True)
encode_url.__name__ = 'encode_url'
encode_url.__doc__ = """Encodes text for use as a form-encoded URL component.

This function behaves like :func:`encode_value`, except that spaces are
replaced with ``'+'`` rather than ``'%20'``, modeling
``urllib.parse.quote_plus(safe="~")``. Since any literal ``'+'`` and
``'%'`` characters are percent-encoded, the result can always be turned
back into the original text with :func:`decode_url`.

Args:
    uri (str): Text to encode.

Returns:
    str: An escaped version of `uri`.

"""


def _join_tokens_bytearray(tokens):
    decoded_uri = bytearray(tokens[0])
    for token in tokens[1:]:
        token_partial = token[:2]
        try:
            decoded_uri += _HEX_TO_BYTE[token_partial] + token[2:]
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded_uri += b'%' + token

    # Convert back to str
    return decoded_uri.decode('utf-8', 'replace')


def _join_tokens_list(tokens):
    decoded = tokens[:1]
    # PERF(vytas): Do not copy list: a simple bool flag is fastest on PyPy JIT.
    skip = True
    for token in tokens:
        if skip:
            skip = False
            continue

        token_partial = token[:2]
        try:
            decoded.append(_HEX_TO_BYTE[token_partial] + token[2:])
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded.append(b'%' + token)

    # Convert back to str
    return b''.join(decoded).decode('utf-8', 'replace')


# PERF(vytas): On pure CPython, bytearray += often comes on top, also with the
#   added benefit of being able to decode() off it directly. On PyPy,
#   b''.join(list) is the recommended approach.
_join_tokens = _join_tokens_list if PYPY else _join_tokens_bytearray


def decode(encoded_uri, unquote_plus=True):
    """Decode percent-encoded characters in a URI or query string.

    This function models the behavior of `urllib.parse.unquote_plus`,
    albeit in a faster, more straightforward manner.

    Args:
        encoded_uri (str): An encoded URI (full or partial).

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters in the given string, rather than converting them to
            spaces (default ``True``). Typically you should set this
            to ``False`` when decoding any part of a URI other than the
            query string.

    Returns:
        str: A decoded URL. If the URL contains escaped non-ASCII
        characters, UTF-8 is assumed per RFC 3986.

    """

    decoded_uri = encoded_uri

    # PERF(kgriffs): Don't take the time to instantiate a new
    # string unless we have to.
    if '+' in decoded_uri and unquote_plus:
        decoded_uri = decoded_uri.replace('+', ' ')

    # Short-circuit if we can
    if '%' not in decoded_uri:
        return decoded_uri

    # NOTE(kgriffs): Clients should never submit a URI that has
    # unescaped non-ASCII chars in them, but just in case they
    # do, let's encode into a non-lossy format.
    decoded_uri = decoded_uri.encode()

    # PERF(kgriffs): This was found to be faster than using
    # a regex sub call or list comprehension with a join.
    tokens = decoded_uri.split(b'%')
    # PERF(vytas): Just use in-place add for a low number of items:
    if len(tokens) < 8:
        decoded_uri = tokens[0]
        for token in tokens[1:]:
            token_partial = token[:2]
            try:
                decoded_uri += _HEX_TO_BYTE[token_partial] + token[2:]
            except KeyError:
                # malformed percentage like "x=%" or "y=%+"
                decoded_uri += b'%' + token

        # Convert back to str
        return decoded_uri.decode('utf-8', 'replace')

    # NOTE(vytas): Decode percent-encoded bytestring fragments and join them
    # back to a string using the platform-dependent method.
    return _join_tokens(tokens)


def decode_url(text):
    """Decode form-encoded text.

    Both ``'+'`` and ``'%20'`` are decoded as a space, so this function
    accepts the output of :func:`encode_url` as well as that of
    :func:`encode_value`.

    Args:
        text (str): Text to decode.

    Returns:
        str: The decoded text.
    """

    return decode(text, unquote_plus=True)


def parse_query_string(query_string, keep_blank=True):
    """Parse a query string into a mapping of parameters.

    Query string parameters are assumed to use standard form-encoding.
    Both names and values are decoded.

    Args:
        query_string (str): The query string to parse, without the
            leading ``'?'``.
        keep_blank (bool): Set to ``False`` to drop fields that do not have
            a value, such as ``'flag'`` or ``'flag='`` (default ``True``).
            Fields with an empty name are always dropped.

    Returns:
        QueryParams: A mapping of (*name*, *value*) pairs. When a name is
        repeated, scalar access yields the last value, while
        :meth:`~.QueryParams.get_all` yields all of them.

    Raises:
        TypeError: `query_string` was not a ``str``.

    """

    pairs = []

    is_encoded = '+' in query_string or '%' in query_string

    # PERF(kgriffs): This was found to be faster than using a regex, for
    # both short and long query strings. Tested on CPython 3.4.
    for field in query_string.split('&'):
        k, _, v = field.partition('=')
        if not k or (not v and not keep_blank):
            continue

        if is_encoded:
            k = decode(k)
            v = decode(v)

        pairs.append((k, v))

    return QueryParams(pairs)


def parse_host(host, default_port=None):
    """Parse a canonical 'host:port' string into parts.

    Parse a host string (which may or may not contain a port) into
    parts, taking into account that the string may contain
    either a domain name or an IP address. In the latter case,
    both IPv4 and bracketed IPv6 addresses are supported.

    Args:
        host (str): Host string to parse, optionally containing a
            port number.

    Keyword Arguments:
        default_port (int): Port number to return when the host string
            does not contain one, or contains an empty one, as in
            ``'example.org:'`` (default ``None``).

    Returns:
        tuple: A parsed (*host*, *port*) tuple from the given
        host string, with the port converted to an ``int``.
        IPv6 addresses retain their enclosing brackets. If the host
        string does not specify a port, `default_port` is used instead.

        The port is not range-checked; that is left to the caller.

    Raises:
        ValueError: The host string is malformed, e.g., it contains an
            unterminated IPv6 literal, or a port that is not an integer.

    """

    # NOTE(kgriff): This is complicated by the fact that
    # a hostname may be specified either as an IP address
    # or as a domain name, and in the case of IPv6 there
    # are multiple colons in the string.

    if host.startswith('['):
        end = host.find(']')
        if end == -1:
            raise ValueError('Unterminated IPv6 literal: {!r}'.format(host))

        name, rest = host[: end + 1], host[end + 1 :]
        if not rest:
            return (name, default_port)
        if not rest.startswith(':'):
            raise ValueError('Unexpected text after IPv6 literal: {!r}'.format(host))

        return (name, _parse_port(rest[1:], default_port))

    pos = host.rfind(':')
    if pos == -1:
        # Bare domain name or IP address
        return (host, default_port)

    if pos != host.find(':'):
        raise ValueError('IPv6 addresses must be enclosed in brackets: {!r}'.format(host))

    # NOTE(kgriffs): At this point we know that there was
    # only a single colon, so we should have an IPv4 address
    # or a domain name plus a port
    name, _, port = host.partition(':')
    return (name, _parse_port(port, default_port))


def _parse_port(port, default_port):
    if not port:
        return default_port

    # NOTE: int() alone would also accept whitespace, underscores, '+' and
    #   non-ASCII digits.
    if not _PORT_PATTERN.match(port):
        raise ValueError('Port is not an integer: {!r}'.format(port))

    return int(port)


__all__ = [
    'decode',
    'decode_url',
    'encode',
    'encode_url',
    'encode_value',
    'parse_host',
    'parse_query_string',
]
