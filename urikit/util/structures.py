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

"""Data structures.

This module provides additional data structures not found in the
standard library. These classes are hoisted into the `urikit` module
for convenience::

    import urikit

    params = urikit.QueryParams([('q', 'a'), ('q', 'b')])
    params['q']  # 'b'

"""

from collections.abc import Mapping

__all__ = ('QueryParams',)


class QueryParams(Mapping):
    """
    An immutable, multi-valued ``dict``-like object of query parameters.

    Implements all methods and operations of
    ``collections.abc.Mapping``, and additionally provides `get_all` and
    `multi_items`.

    Keys may be repeated in the pairs used to construct the mapping.
    Scalar access returns the value of the last occurrence of a key,
    while ``iter(instance)`` yields every distinct key once, in the order
    of its first appearance:

        params = QueryParams([('a', '1'), ('b', '2'), ('a', '3')])
        params['a'] == '3'  # True
        params.get_all('a') == ['1', '3']  # True
        list(params) == ['a', 'b']  # True

    Equality is determined by scalar (last-wins) access, so an instance
    compares equal to a plain ``dict`` holding the same last values. Unlike
    a ``dict``, an instance is hashable.
    """

    __slots__ = ('_pairs', '_store')

    def __init__(self, pairs=()):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        self._pairs = tuple((key, value) for key, value in pairs)

        store = {}
        for key, value in self._pairs:
            store.setdefault(key, []).append(value)
        self._store = store

    def __getitem__(self, key):
        return self._store[key][-1]

    def __iter__(self):
        return iter(self._store)

    def __len__(self):
        return len(self._store)

    def __contains__(self, key):
        return key in self._store

    def get_all(self, key, default=None):
        """Return all values given for `key`, in order of appearance.

        Args:
            key (str): Name of the parameter.

        Keyword Arguments:
            default: Value to return when the key is absent (default
                ``None``).

        Returns:
            list: A new list of every value supplied for `key`.
        """
        try:
            return list(self._store[key])
        except KeyError:
            return default

    def multi_items(self):
        """Return every (*key*, *value*) pair, including repeated keys."""
        return list(self._pairs)

    def __eq__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self._pairs))
