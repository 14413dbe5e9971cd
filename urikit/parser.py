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

"""URI parts extraction.

This module splits ``http``/``https`` URIs and RFC 2397 ``data`` URIs
into immutable records. The grammar to apply is selected via the
:class:`~urikit.constants.SchemeFamily` argument::

    import urikit

    parts = urikit.parse_uri('www.example.com:443')
    parts.scheme, parts.port  # ('https', 443)

    parts = urikit.parse_uri('data:;base64,bW9pbg', urikit.SchemeFamily.DATA)
    parts.decode()  # b'moin'

Parsing is a pure function of its input and options; errors are reported
by raising a :class:`~urikit.errors.ParseError` specialization.
"""

from __future__ import annotations

import ipaddress
import re
from types import MappingProxyType
from typing import Callable, Dict, Optional, Union
from urllib.parse import urlsplit

from urikit import errors
from urikit.constants import DATA_SCHEME
from urikit.constants import DEFAULT_PORTS
from urikit.constants import HTTP_SCHEMES
from urikit.constants import MAX_PORT
from urikit.constants import SchemeFamily
from urikit.options import ParserOptions
from urikit.parts import DataURIParts
from urikit.parts import HTTPURIParts
from urikit.parts import URIParts
from urikit.util.uri import decode
from urikit.util.uri import parse_host
from urikit.util.uri import parse_query_string

__all__ = ('parse_data_uri', 'parse_http_uri', 'parse_uri', 'URIParser')

# NOTE: RFC 3986, Section 3.1, minus the digits.
_SCHEME_PATTERN = re.compile(r'[A-Za-z][A-Za-z.+\-]*\Z')

_HTTP_PREFIX_PATTERN = re.compile(r'https?://', re.IGNORECASE)
_HTTP_SCHEME_PATTERN = re.compile(r'https?:', re.IGNORECASE)
_EXPLICIT_SCHEME_PATTERN = re.compile(r'([^:/?#]*)://')

# NOTE: An authority ending in ":443", followed by nothing or by the start
#   of a path, query or fragment. "user:443@host" or "host:4430" do not
#   qualify.
_HTTPS_AUTHORITY_PATTERN = re.compile(r'[^/?#]*:443(?:[/?#]|\Z)')

# NOTE: urlsplit() silently strips some of these, so reject them up front.
_FORBIDDEN_CHARS_PATTERN = re.compile(r'[\x00-\x20\x7f]')

# NOTE: RFC 3986, Section 3.2.2 (reg-name, which also covers IPv4address).
_REG_NAME_PATTERN = re.compile(r"[A-Za-z0-9\-._~%!$&'()*+,;=]+\Z")

# NOTE: RFC 2045, Section 5.1 token characters on either side of the slash.
_MIME_TYPE_PATTERN = re.compile(
    r"[A-Za-z0-9!#$%&'*+\-.^_`{|}~]+/[A-Za-z0-9!#$%&'*+\-.^_`{|}~]+\Z"
)

_BASE64_TOKEN = 'base64'


def _check_type(uri: str) -> None:
    if not isinstance(uri, str):
        raise TypeError('Expected a str URI, got {}'.format(type(uri).__name__))


def _infer_scheme(uri: str, options: ParserOptions) -> str:
    if _HTTP_PREFIX_PATTERN.match(uri):
        return uri

    # NOTE: "http:/example.com" would otherwise become "http://http:/example.com".
    if _HTTP_SCHEME_PATTERN.match(uri):
        raise errors.InvalidURI(
            'The http or https scheme must be followed by "//".', uri=uri
        )

    explicit = _EXPLICIT_SCHEME_PATTERN.match(uri)
    if explicit:
        scheme = explicit.group(1)
        if not _SCHEME_PATTERN.match(scheme):
            raise errors.InvalidScheme(
                'Malformed URI scheme {!r}.'.format(scheme), uri=uri
            )
        raise errors.UnsupportedScheme(
            'The {!r} scheme is not supported; expected http or https.'.format(
                scheme.lower()
            ),
            uri=uri,
        )

    if not options.infer_scheme:
        raise errors.InvalidScheme('The URI lacks an http or https scheme.', uri=uri)

    if _HTTPS_AUTHORITY_PATTERN.match(uri):
        return 'https://' + uri
    return 'http://' + uri


def _check_host(host: str, uri: str) -> None:
    if host.startswith('['):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError as ex:
            raise errors.InvalidURI(
                'Malformed IPv6 address {!r}.'.format(host), uri=uri
            ) from ex
        return

    if not host:
        raise errors.InvalidURI('The URI does not specify a host.', uri=uri)

    if not _REG_NAME_PATTERN.match(host):
        raise errors.InvalidURI('Malformed host {!r}.'.format(host), uri=uri)


def parse_http_uri(
    uri: str, options: Optional[ParserOptions] = None
) -> HTTPURIParts:
    """Parse an ``http`` or ``https`` URI.

    If `uri` lacks a scheme, one is inferred: ``https`` when the authority
    ends with port 443, and ``http`` otherwise. When the URI does not
    specify a port, the default port for the scheme is assumed.

    Args:
        uri (str): The URI to parse.
        options (ParserOptions): Parsing options (default ``None``, in
            which case the default options are used).

    Returns:
        HTTPURIParts: The components of the URI.

    Raises:
        InvalidURI: `uri` does not form a valid absolute URI.
        InvalidScheme: The scheme is malformed, or missing while scheme
            inference is disabled.
        UnsupportedScheme: The scheme is not ``http`` or ``https``.
        InvalidPath: The path begins with ``'//'``.
        InvalidPort: The port lies outside of the range 0 to 65535.
        TypeError: `uri` is not a ``str``.
    """
    _check_type(uri)
    if options is None:
        options = ParserOptions()

    if not uri:
        raise errors.InvalidURI('The URI must not be empty.', uri=uri)

    if _FORBIDDEN_CHARS_PATTERN.search(uri):
        raise errors.InvalidURI(
            'The URI contains whitespace or control characters.', uri=uri
        )

    absolute = _infer_scheme(uri, options)

    try:
        scheme, netloc, path, query, fragment = urlsplit(absolute)
    except ValueError as ex:
        raise errors.InvalidURI(str(ex), uri=uri) from ex

    scheme = scheme.lower()
    if not _SCHEME_PATTERN.match(scheme):
        raise errors.InvalidScheme('Malformed URI scheme {!r}.'.format(scheme), uri=uri)

    # NOTE: With an empty authority, "http:////x" would leave us guessing
    #   where the authority was meant to end and the path to begin.
    if path.startswith('//'):
        raise errors.InvalidPath('The URI path must not begin with "//".', uri=uri)

    if not netloc:
        raise errors.InvalidURI('The URI does not specify an authority.', uri=uri)

    userinfo, _, hostport = netloc.rpartition('@')
    user, _, password = userinfo.partition(':')

    try:
        host, port = parse_host(hostport, DEFAULT_PORTS.get(scheme, 0))
    except ValueError as ex:
        raise errors.InvalidURI(str(ex), uri=uri) from ex

    _check_host(host, uri)

    if not 0 <= port <= MAX_PORT:
        raise errors.InvalidPort(
            'Port {} is outside of the range 0 to {}.'.format(port, MAX_PORT),
            uri=uri,
        )

    if scheme not in HTTP_SCHEMES:
        raise errors.UnsupportedScheme(
            'The {!r} scheme is not supported; expected http or https.'.format(
                scheme
            ),
            uri=uri,
        )

    return HTTPURIParts(
        scheme=scheme,
        user=decode(user, unquote_plus=False),
        password=decode(password, unquote_plus=False),
        host=host.lower(),
        port=port,
        path=path or '/',
        query=parse_query_string(query, keep_blank=options.keep_blank_qs_values),
        fragment=fragment,
        raw=absolute,
    )


def parse_data_uri(
    uri: str, options: Optional[ParserOptions] = None
) -> DataURIParts:
    """Parse an RFC 2397 ``data`` URI.

    The expected grammar is
    ``data:[<mediatype>][;<param>=<value>]*[;base64],<data>``. When the
    media type is omitted, ``text/plain`` is assumed, and when no
    ``charset`` parameter is given, ``US-ASCII`` is assumed (both defaults
    may be changed via `options`).

    The payload is returned verbatim; use :meth:`DataURIParts.decode` to
    obtain the bytes it represents.

    Args:
        uri (str): The URI to parse.
        options (ParserOptions): Parsing options (default ``None``, in
            which case the default options are used).

    Returns:
        DataURIParts: The components of the URI.

    Raises:
        EmptyURI: `uri` is an empty string.
        InvalidURI: `uri` does not start with ``data:``, lacks the comma
            separating the payload, or has a malformed media type.
        InvalidParameter: A parameter is not a ``key=value`` pair, or
            ``base64`` is not the final parameter.
        TypeError: `uri` is not a ``str``.
    """
    _check_type(uri)
    if options is None:
        options = ParserOptions()

    if not uri:
        raise errors.EmptyURI(uri=uri)

    if uri[:5].lower() != DATA_SCHEME + ':':
        raise errors.InvalidURI('The URI must begin with "data:".', uri=uri)

    metadata, comma, data = uri[5:].partition(',')
    if not comma:
        raise errors.InvalidURI(
            'The data URI lacks a comma before the payload.', uri=uri
        )

    segments = metadata.split(';')
    mime_type = options.default_mime_type
    is_base64 = False

    first = segments[0]
    if '=' not in first:
        segments = segments[1:]

        if first.strip():
            mime_type = first.strip()
            if not _MIME_TYPE_PATTERN.match(mime_type):
                raise errors.InvalidURI(
                    'Malformed media type {!r}.'.format(mime_type), uri=uri
                )

    parameters: Dict[str, str] = {}
    last = len(segments) - 1

    for index, segment in enumerate(segments):
        if index == last and segment.strip().lower() == _BASE64_TOKEN:
            is_base64 = True
            continue

        name, equals, value = segment.partition('=')
        name = name.strip()

        if not equals or not name or '=' in value:
            raise errors.InvalidParameter(
                'Malformed data URI parameter {!r}.'.format(segment), uri=uri
            )

        parameters[name.lower()] = value.strip()

    parameters.setdefault('charset', options.default_charset)

    return DataURIParts(
        scheme=DATA_SCHEME,
        mime_type=mime_type.lower(),
        parameters=MappingProxyType(parameters),
        base64=is_base64,
        data=data,
    )


_STRATEGIES: Dict[SchemeFamily, Callable[..., URIParts]] = {
    SchemeFamily.HTTP: parse_http_uri,
    SchemeFamily.DATA: parse_data_uri,
}


def parse_uri(
    uri: str,
    scheme_family: Union[SchemeFamily, str] = SchemeFamily.HTTP,
    options: Optional[ParserOptions] = None,
) -> URIParts:
    """Parse a URI into its parts according to the given scheme family.

    Args:
        uri (str): The URI to parse.
        scheme_family: The grammar to apply, either a
            :class:`~urikit.constants.SchemeFamily` member or its
            case-insensitive name (default ``SchemeFamily.HTTP``).
        options (ParserOptions): Parsing options (default ``None``).

    Returns:
        URIParts: An :class:`~urikit.parts.HTTPURIParts` or
        :class:`~urikit.parts.DataURIParts` instance, depending on
        `scheme_family`.

    Raises:
        ParseError: `uri` could not be parsed. See :func:`parse_http_uri`
            and :func:`parse_data_uri` for the specific error types.
        ValueError: `scheme_family` is not a supported family.
    """
    family = SchemeFamily.lookup(scheme_family)
    return _STRATEGIES[family](uri, options)


class URIParser:
    """A URI parser bound to a set of :class:`~urikit.options.ParserOptions`.

    Keyword Args:
        options (ParserOptions): Options to apply to every parse (default
            ``None``, in which case a new default instance is created).

    Attributes:
        options (ParserOptions): The options in effect.
    """

    __slots__ = ('options',)

    def __init__(self, options: Optional[ParserOptions] = None) -> None:
        self.options = options if options is not None else ParserOptions()

    def parse(
        self, uri: str, scheme_family: Union[SchemeFamily, str] = SchemeFamily.HTTP
    ) -> URIParts:
        """Parse `uri`; see :func:`parse_uri`."""
        return parse_uri(uri, scheme_family, self.options)

    def parse_http(self, uri: str) -> HTTPURIParts:
        return parse_http_uri(uri, self.options)

    def parse_data(self, uri: str) -> DataURIParts:
        return parse_data_uri(uri, self.options)
