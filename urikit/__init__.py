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

"""Primary package for urikit.

urikit parses ``http``/``https`` and ``data`` URIs into immutable records,
and provides the percent-encoding and Base64 helpers that go with them.
Most of the library's classes and functions are available directly from
the `urikit` package::

    import urikit

    parts = urikit.parse_uri('https://user:password@[::1]:8080/index.php?q1=a')
    parts.host  # '[::1]'
"""

import logging as _logging

__all__ = (
    # Parsing
    'parse_data_uri',
    'parse_http_uri',
    'parse_uri',
    'ParserOptions',
    'URIParser',
    # Records
    'DataURIParts',
    'HTTPURIParts',
    'URIParts',
    # Public constants
    'DEFAULT_CHARSET',
    'DEFAULT_MIME_TYPE',
    'DEFAULT_PORTS',
    'SchemeFamily',
    # Utilities
    'decode_base64',
    'decode_url',
    'encode_base64',
    'encode_url',
    'QueryParams',
    'TextEncoding',
    # Errors
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

from urikit.constants import DEFAULT_CHARSET
from urikit.constants import DEFAULT_MIME_TYPE
from urikit.constants import DEFAULT_PORTS
from urikit.constants import SchemeFamily
from urikit.errors import EmptyInput
from urikit.errors import EmptyURI
from urikit.errors import EncodingError
from urikit.errors import InvalidBase64
from urikit.errors import InvalidParameter
from urikit.errors import InvalidPath
from urikit.errors import InvalidPort
from urikit.errors import InvalidScheme
from urikit.errors import InvalidURI
from urikit.errors import ParseError
from urikit.errors import UnsupportedEncoding
from urikit.errors import UnsupportedScheme
from urikit.errors import URIKitError
from urikit.options import ParserOptions
from urikit.parser import parse_data_uri
from urikit.parser import parse_http_uri
from urikit.parser import parse_uri
from urikit.parser import URIParser
from urikit.parts import DataURIParts
from urikit.parts import HTTPURIParts
from urikit.parts import URIParts
from urikit.util import decode_base64
from urikit.util import decode_url
from urikit.util import encode_base64
from urikit.util import encode_url
from urikit.util import QueryParams
from urikit.util import TextEncoding
from urikit.util import uri  # NOQA: F401

# Package version
from urikit.version import __version__  # NOQA: F401

# NOTE: The library itself only logs at DEBUG level; leave the decision of
#   where (and whether) to emit that output to the application.
_logger = _logging.getLogger('urikit')
_logger.addHandler(_logging.NullHandler())
