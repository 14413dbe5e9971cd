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

"""Parser configuration."""

from __future__ import annotations

from urikit.constants import DEFAULT_CHARSET
from urikit.constants import DEFAULT_MIME_TYPE

__all__ = ('ParserOptions',)


class ParserOptions:
    """Defines a set of configurable URI parsing options.

    An instance of this class may be passed to :func:`urikit.parse_uri`, or
    bound to a :class:`urikit.URIParser`, in order to tweak certain parsing
    behaviors. Options are only ever read while parsing, so a single instance
    may be shared between threads as long as it is not modified concurrently.
    """

    keep_blank_qs_values: bool
    """Set to ``False`` to ignore query string params that have missing or blank
    values (default ``True``).

    When ``True``, both ``flag`` and ``flag=`` are returned as ``''``.
    """

    infer_scheme: bool
    """Set to ``False`` to reject HTTP-family URIs that lack an explicit
    ``http://`` or ``https://`` prefix (default ``True``).

    When enabled, ``https://`` is assumed for authorities ending in ``:443``,
    and ``http://`` otherwise.
    """

    default_mime_type: str
    """The media type assumed for data URIs that do not specify one
    (default ``'text/plain'``).
    """

    default_charset: str
    """The charset assumed for data URIs that do not specify one
    (default ``'US-ASCII'``).
    """

    __slots__ = (
        'keep_blank_qs_values',
        'infer_scheme',
        'default_mime_type',
        'default_charset',
    )

    def __init__(self) -> None:
        self.keep_blank_qs_values = True
        self.infer_scheme = True
        self.default_mime_type = DEFAULT_MIME_TYPE
        self.default_charset = DEFAULT_CHARSET

    def __repr__(self) -> str:
        return '{}({})'.format(
            type(self).__name__,
            ', '.join(
                '{}={!r}'.format(name, getattr(self, name)) for name in self.__slots__
            ),
        )
