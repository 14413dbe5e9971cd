"""General utilities.

This package includes the text codecs and data structures used by the URI
parser. The most commonly used functions are imported directly into the
front-door `urikit` module for convenience::

    import urikit

    urikit.decode_url('moin+moin')

Conversely, the remaining functions of the `uri` module must be imported
explicitly::

    from urikit.util import uri

    name, port = uri.parse_host('[::1]:8080')
"""

from urikit.util.b64 import decode_base64
from urikit.util.b64 import encode_base64
from urikit.util.b64 import TextEncoding
from urikit.util.structures import QueryParams
from urikit.util.uri import decode_url
from urikit.util.uri import encode_url

__all__ = (
    'decode_base64',
    'decode_url',
    'encode_base64',
    'encode_url',
    'QueryParams',
    'TextEncoding',
)
