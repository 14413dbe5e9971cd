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

"""Base64 utilities.

This module converts between text or binary data and its Base64
representation. The two public functions are hoisted into the `urikit`
package namespace::

    import urikit

    encoded = urikit.encode_base64('moin', 'ISO-8859-1')
    text = urikit.decode_base64(encoded, 'ISO-8859-1')
"""

from __future__ import annotations

import base64
import binascii
from enum import Enum
import logging
from typing import Union

from urikit import errors

__all__ = ('decode_base64', 'encode_base64', 'TextEncoding')

_logger = logging.getLogger(__name__)


class TextEncoding(Enum):
    """Text encodings supported for converting between text and bytes.

    Each member's value is the name of the corresponding Python codec.
    The UTF-16 and UTF-32 encodings are little-endian and do not emit a
    byte order mark.
    """

    ASCII = 'ascii'
    UTF_16 = 'utf-16-le'
    UTF_7 = 'utf-7'
    UTF_8 = 'utf-8'
    UTF_32 = 'utf-32-le'
    ISO_8859_1 = 'latin-1'
    WINDOWS_1252 = 'cp1252'

    @classmethod
    def lookup(cls, encoding: Union[TextEncoding, str]) -> TextEncoding:
        """Resolve an encoding name such as ``'UTF-8'`` or ``'latin-1'``.

        Names are matched case-insensitively, ignoring dashes and
        underscores.

        Raises:
            UnsupportedEncoding: `encoding` does not name a supported
                encoding.
        """
        if isinstance(encoding, cls):
            return encoding

        if isinstance(encoding, str):
            key = encoding.upper().replace('-', '').replace('_', '')
            member = _ALIASES.get(key)
            if member is not None:
                return member

        raise errors.UnsupportedEncoding(
            'Unsupported text encoding {!r}; expected one of: {}'.format(
                encoding, ', '.join(member.name for member in cls)
            )
        )


_ALIASES = {
    'ASCII': TextEncoding.ASCII,
    'USASCII': TextEncoding.ASCII,
    'UTF16': TextEncoding.UTF_16,
    'UTF7': TextEncoding.UTF_7,
    'UTF8': TextEncoding.UTF_8,
    'UTF32': TextEncoding.UTF_32,
    'ISO88591': TextEncoding.ISO_8859_1,
    'LATIN1': TextEncoding.ISO_8859_1,
    'WINDOWS1252': TextEncoding.WINDOWS_1252,
    'CP1252': TextEncoding.WINDOWS_1252,
}

_PADDINGS = ('', '=', '==')

_STRIP_WHITESPACE = {ord(char): None for char in ' \t\n\r\f\v'}


def encode_base64(
    value: Union[str, bytes, bytearray, memoryview],
    encoding: Union[TextEncoding, str] = TextEncoding.UTF_8,
) -> str:
    """Encode text or binary data as Base64.

    Args:
        value: The data to encode. Bytes-like values are encoded as-is;
            text is first converted to bytes using `encoding`.
        encoding: Text encoding to use when `value` is a ``str``
            (default UTF-8). Ignored for bytes-like values.

    Returns:
        str: The padded, standard-alphabet Base64 representation.

    Raises:
        EmptyInput: `value` is an empty string.
        UnsupportedEncoding: `encoding` is not supported.
        TypeError: `value` is neither text nor bytes-like.
    """
    if isinstance(value, str):
        if not value:
            raise errors.EmptyInput('Cannot Base64-encode an empty string.')

        codec = TextEncoding.lookup(encoding).value
        value = value.encode(codec)
    elif not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(
            'Expected str or bytes-like value, got {}'.format(type(value).__name__)
        )

    return base64.b64encode(value).decode('ascii')


def decode_base64(
    value: str,
    encoding: Union[TextEncoding, str] = TextEncoding.UTF_8,
    as_bytes: bool = False,
) -> Union[str, bytes]:
    """Decode a Base64 string, tolerating missing padding.

    Decoding is first attempted on `value` as given; should that fail, it
    is retried with one and then two ``'='`` characters appended.
    ASCII whitespace, such as the line breaks of wrapped Base64, is removed
    beforehand; any other characters outside of the standard Base64 alphabet
    are rejected.

    Args:
        value (str): The Base64 text to decode.
        encoding: Text encoding used to convert the decoded bytes into
            text (default UTF-8). Ignored when `as_bytes` is set.
        as_bytes (bool): Set to ``True`` to return the raw decoded bytes
            (default ``False``).

    Returns:
        The decoded ``str``, or ``bytes`` if `as_bytes` was requested.

    Raises:
        InvalidBase64: `value` could not be decoded with any padding.
        UnsupportedEncoding: `encoding` is not supported.
        TypeError: `value` is not a ``str``.
    """
    if not isinstance(value, str):
        raise TypeError('Expected a str value, got {}'.format(type(value).__name__))

    codec = None if as_bytes else TextEncoding.lookup(encoding).value
    value = value.translate(_STRIP_WHITESPACE)

    for padding in _PADDINGS:
        try:
            data = base64.b64decode(value + padding, validate=True)
        except (binascii.Error, ValueError):
            continue

        if padding:
            _logger.debug('Decoded Base64 input after appending %r', padding)
        break
    else:
        raise errors.InvalidBase64(
            'The input is not valid Base64: {!r}'.format(_truncate(value))
        )

    if as_bytes:
        return data

    return data.decode(codec)


def _truncate(value, limit=32):
    if len(value) <= limit:
        return value
    return value[:limit] + '...'
