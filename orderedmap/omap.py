
#
# orderedmap - Copyright (C) orderedmap contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""
This module contains the insertion-ordered map implementation.

The map keeps two structures in sync: a list of slots in insertion order and a
dict from key to slot position. Deleting a key only blanks its slot, so
positions of the remaining entries never shift and the index never needs to be
rebuilt. Slots are not reused: a key that is deleted and set again goes to the
end.

>>> from orderedmap import OrderedMap
>>> om = OrderedMap([('x', 1), ('y', 2)])
>>> om.set('x', 3).set('z', 4).delete('y')
>>> om.to_json()
'{"x":3,"z":4}'
"""

import logging
logger = logging.getLogger(__name__)

from reprlib import recursive_repr

import orderedmap.const

from orderedmap.error import EncodingError


class KV(object):
    """A single key/value pair."""

    __slots__ = ('key', 'value')

    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __iter__(self):
        yield self.key
        yield self.value

    def __eq__(self, other):
        if isinstance(other, (KV, tuple)):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __ne__(self, other):
        retval = self.__eq__(other)
        if retval is NotImplemented:
            return retval
        return not retval

    __hash__ = None

    @recursive_repr()
    def __repr__(self):
        return "KV(%r, %r)" % (self.key, self.value)

    def to_json(self, protocol=None):
        """Returns the pair as a single-key json object."""

        return _get_json_protocol(protocol).pair_to_string(self.key, self.value)

    def to_yaml(self, protocol=None):
        """Returns the pair as a single-key yaml mapping."""

        from orderedmap.protocol.yaml import YamlDocument
        if protocol is None:
            protocol = YamlDocument()

        return protocol.json_to_yaml(self.to_json(protocol.json_protocol))


class OrderedMap(object):
    """Dictionary that remembers the order its keys were first set in.

    :param data: An iterable of ``(key, value)`` pairs or another
        ``OrderedMap``. Pairs are set left to right, so a repeated key keeps
        the position of its first occurrence and the value of its last.
    """

    def __init__(self, data=()):
        self.__list = []
        self.__index = {}

        if isinstance(data, OrderedMap):
            data = data.get_list()

        for k, v in data:
            self.set(k, v)

    def set(self, key, value):
        """Sets ``value`` for ``key``. A new key goes to the end, an existing
        key is updated where it is. Returns self."""

        idx = self.__index.get(key, None)
        if idx is None:
            self.__index[key] = len(self.__list)
            self.__list.append(KV(key, value))
        else:
            self.__list[idx].value = value

        return self

    def get(self, key, default=None):
        """Returns the value for ``key``, or ``default`` when the key is not
        in the map."""

        idx = self.__index.get(key, None)
        if idx is None:
            return default
        return self.__list[idx].value

    def exists(self, key):
        """Returns True when ``key`` is in the map."""

        return key in self.__index

    def delete(self, key):
        """Removes ``key``. Does nothing if the key is not in the map."""

        idx = self.__index.pop(key, None)
        if idx is not None:
            self.__list[idx] = None

    def get_keys(self):
        """Returns the live keys in insertion order, as a new list."""

        return [kv.key for kv in self.__list if kv is not None]

    def get_list(self):
        """Returns the live pairs in order, as copies. Changing a returned
        pair does not change the map."""

        return [KV(kv.key, kv.value) for kv in self.__list if kv is not None]

    def append(self, other, overwrite=False):
        """Merges the pairs of ``other`` into this map, in the order of
        ``other``. Keys that are already here are skipped unless ``overwrite``
        is set, in which case they get the new value but keep their position.
        Returns self."""

        for k, v in other.get_list():
            if not overwrite and k in self.__index:
                continue
            self.set(k, v)

        return self

    def compact(self):
        """Drops the blank slots left behind by deletions. The order of the
        live keys does not change."""

        self.__list = [kv for kv in self.__list if kv is not None]
        self.__index = dict((kv.key, i) for i, kv in enumerate(self.__list))

        return self

    def copy(self):
        return self.__class__(self)

    def keys(self):
        return self.get_keys()

    def values(self):
        return [kv.value for kv in self.__list if kv is not None]

    def items(self):
        return self.get_list()

    def to_json(self, protocol=None):
        """Returns the object-form text of the map. Raises
        :class:`orderedmap.error.EncodingError` when a key or a value can not
        be encoded."""

        return _get_json_protocol(protocol).create_out_string(self)

    def to_yaml(self, protocol=None):
        """Returns the yaml text derived from :meth:`to_json`. Raises
        :class:`orderedmap.error.EncodingError` when the json step fails and
        :class:`orderedmap.error.ConversionError` when the yaml step fails."""

        from orderedmap.protocol.yaml import YamlDocument
        if protocol is None:
            protocol = YamlDocument()

        return protocol.create_out_string(self)

    def __getitem__(self, key):
        return self.__list[self.__index[key]].value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        idx = self.__index.pop(key)
        self.__list[idx] = None

    def __contains__(self, key):
        return key in self.__index

    def __len__(self):
        return len(self.__index)

    def __iter__(self):
        return iter(self.get_keys())

    @recursive_repr()
    def __repr__(self):
        return "%s([%s])" % (self.__class__.__name__,
                ', '.join(["(%r, %r)" % (k, v) for k, v in self.get_list()]))

    def __str__(self):
        """Best-effort json text. An encoding failure is logged and
        :data:`orderedmap.const.DISPLAY_ON_ERROR` is returned in its place;
        call :meth:`to_json` to get the error instead."""

        try:
            return self.to_json()
        except EncodingError as e:
            logger.warning("Could not stringify %s instance: %s",
                                         self.__class__.__name__, e.faultstring)
            return orderedmap.const.DISPLAY_ON_ERROR


def _get_json_protocol(protocol):
    if protocol is not None:
        return protocol

    from orderedmap.protocol.json import JsonDocument
    return JsonDocument()
