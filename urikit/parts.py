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

"""Records produced by the URI parser.

Every successful parse yields a fresh, immutable instance of one of the
:class:`URIParts` specializations below, depending on the scheme family
that was requested::

    import urikit

    parts = urikit.parse_uri('https://example.org/search?q=moin')
    parts.host  # 'example.org'
    parts.query['q']  # 'moin'
"""

from __future__ import annotations

import codecs
import dataclasses
from typing import Mapping
from urllib.parse import unquote_to_bytes

from urikit import errors
from urikit.util.b64 import decode_base64
from urikit.util.structures import QueryParams

__all__ = ('DataURIParts', 'HTTPURIParts', 'URIParts')


@dataclasses.dataclass(frozen=True)
class URIParts:
    """Base class for parsed URI records.

    Attributes:
        scheme (str): The lowercased URI scheme.
    """

    scheme: str


@dataclasses.dataclass(frozen=True)
class HTTPURIParts(URIParts):
    """The components of an ``http`` or ``https`` URI.

    Attributes:
        scheme (str): Either ``'http'`` or ``'https'``.
        user (str): Percent-decoded user name, or ``''``.
        password (str): Percent-decoded password, or ``''``.
        host (str): Lowercased host name or IP address. IPv6 addresses
            retain their enclosing brackets, e.g., ``'[::1]'``.
        port (int): The explicit port, or else the default port for the
            scheme.
        path (str): The path as it appears in the URI; ``'/'`` if empty.
        query (QueryParams): Decoded query string parameters.
        fragment (str): The fragment, without the leading ``'#'``.
        raw (str): The absolute URI that was parsed, including any
            inferred scheme.
    """

    user: str = ''
    password: str = ''
    host: str = ''
    port: int = 0
    path: str = '/'
    query: QueryParams = dataclasses.field(default_factory=QueryParams)
    fragment: str = ''
    raw: str = dataclasses.field(default='', compare=False)

    @property
    def netloc(self) -> str:
        """The ``host:port`` pair, always including the port."""
        return '{}:{}'.format(self.host, self.port)


@dataclasses.dataclass(frozen=True)
class DataURIParts(URIParts):
    """The components of an RFC 2397 ``data`` URI.

    Attributes:
        scheme (str): Always ``'data'``.
        mime_type (str): Lowercased media type of the payload.
        parameters (Mapping[str, str]): Read-only mapping of media type
            parameters, keyed by lowercased name. Always includes
            ``'charset'``.
        base64 (bool): Whether the payload is Base64-encoded.
        data (str): The payload exactly as it appears after the first
            comma. It is never decoded by the parser; see :meth:`decode`.
    """

    mime_type: str = ''
    # NOTE: Mapping proxies are not hashable, so leave this out of the hash.
    parameters: Mapping[str, str] = dataclasses.field(default_factory=dict, hash=False)
    base64: bool = False
    data: str = ''

    @property
    def charset(self) -> str:
        return self.parameters['charset']

    def decode(self) -> bytes:
        """Decode the payload into bytes.

        Base64 payloads are decoded tolerating missing padding; all other
        payloads are percent-decoded.

        Raises:
            InvalidBase64: The payload is flagged as Base64, but is not.
        """
        if self.base64:
            return decode_base64(self.data, as_bytes=True)

        return unquote_to_bytes(self.data)

    def decode_text(self) -> str:
        """Decode the payload into text using the declared charset.

        Raises:
            InvalidBase64: The payload is flagged as Base64, but is not.
            UnsupportedEncoding: The charset is unknown to Python.
        """
        try:
            codec = codecs.lookup(self.charset).name
        except LookupError as ex:
            raise errors.UnsupportedEncoding(
                'Unknown charset {!r}'.format(self.charset)
            ) from ex

        return self.decode().decode(codec)
