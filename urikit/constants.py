from enum import Enum
import sys

__all__ = (
    'DATA_SCHEME',
    'DEFAULT_CHARSET',
    'DEFAULT_MIME_TYPE',
    'DEFAULT_PORTS',
    'HTTP_SCHEMES',
    'MAX_PORT',
    'SchemeFamily',
)

PYPY = sys.implementation.name == 'pypy'
"""Evaluates to ``True`` when the current Python implementation is PyPy."""

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

URIKIT_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of urikit supports the current Python version."""

if not URIKIT_SUPPORTED:  # pragma: nocover
    raise ImportError('urikit requires Python 3.8+.')

# NOTE: RFC 7230, Section 2.7.1 and 2.7.2
DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}

HTTP_SCHEMES = frozenset(DEFAULT_PORTS)

DATA_SCHEME = 'data'

MAX_PORT = 65535

# NOTE: RFC 2397, Section 2: "If <mediatype> is omitted, it defaults to
#   text/plain;charset=US-ASCII."
DEFAULT_MIME_TYPE = 'text/plain'
DEFAULT_CHARSET = 'US-ASCII'


class SchemeFamily(Enum):
    """Enum representing the two URI grammars understood by the parser."""

    HTTP = 'http'
    DATA = 'data'

    @classmethod
    def lookup(cls, value):
        """Coerce a member or a case-insensitive family name into a member.

        Raises:
            ValueError: `value` does not name a supported family.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass

        raise ValueError(
            'Unknown scheme family {!r}; expected one of: {}'.format(
                value, ', '.join(member.name for member in cls)
            )
        )
