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

"""Error classes raised by urikit.

Every error raised by this package is a specialization of
:class:`URIKitError`, which in turn derives from ``ValueError``. All
classes are available directly from the `urikit` package namespace::

    import urikit

    try:
        parts = urikit.parse_uri(untrusted)
    except urikit.InvalidPort as ex:
        print(ex.uri, ex.description)
"""

from __future__ import annotations

from typing import Optional

__all__ = (
    'EmptyInput',
    'EmptyURI',
    'EncodingError',
    'InvalidBase64',
    'InvalidParameter',
    'InvalidPath',
    'InvalidPort',
    'InvalidScheme',
    'InvalidURI',
    'ParseError',
    'UnsupportedEncoding',
    'UnsupportedScheme',
    'URIKitError',
)


class URIKitError(ValueError):
    """Base class for all errors raised by urikit."""


class ParseError(URIKitError):
    """The given string could not be parsed into URI parts.

    Args:
        description (str): Human-friendly description of the problem. If
            not provided, a generic description for the error class is
            used.

    Keyword Args:
        uri (str): The URI string that failed to parse, if known.

    Attributes:
        description (str): Human-friendly description of the problem.
        uri (str): The offending URI, or ``None``.
    """

    _default_description = 'The URI could not be parsed.'

    def __init__(
        self, description: Optional[str] = None, uri: Optional[str] = None
    ) -> None:
        self.description = description or self._default_description
        self.uri = uri
        super().__init__(self.description)

    def __repr__(self) -> str:
        return '<{}: {!r} (uri={!r})>'.format(
            type(self).__name__, self.description, self.uri
        )


class InvalidURI(ParseError):
    """The string does not form a valid absolute URI."""

    _default_description = 'The string is not a valid URI.'


class EmptyURI(InvalidURI):
    """An empty string was given where a URI was expected."""

    _default_description = 'The URI must not be empty.'


class InvalidScheme(ParseError):
    """The URI scheme is missing or syntactically invalid."""

    _default_description = 'The URI scheme is missing or malformed.'


class UnsupportedScheme(ParseError):
    """The URI scheme is well-formed, but not one this parser handles."""

    _default_description = 'The URI scheme is not supported.'


class InvalidPath(ParseError):
    """The URI path is ambiguous or malformed."""

    _default_description = 'The URI path is invalid.'


class InvalidPort(ParseError):
    """The URI port lies outside of the range 0 through 65535."""

    _default_description = 'The URI port must be in the range 0 to 65535.'


class InvalidParameter(ParseError):
    """A data URI parameter is not a well-formed ``key=value`` pair."""

    _default_description = 'The data URI contains a malformed parameter.'


class EncodingError(URIKitError):
    """Base class for errors raised by the text codecs."""


class EmptyInput(EncodingError):
    """An empty string was given where text to encode was expected."""


class InvalidBase64(EncodingError):
    """The input is not valid Base64, even with padding appended."""


class UnsupportedEncoding(EncodingError, LookupError):
    """The named text encoding is not one of the supported encodings."""
