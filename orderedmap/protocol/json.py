
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

"""The ``orderedmap.protocol.json`` module contains the json encoder and the
:class:`JsonDocument` protocol that writes ordered maps as json text and reads
them back.

Values
======

Everything the json library can encode is encoded as usual. On top of that,
nested :class:`orderedmap.OrderedMap` instances are written in their own order,
:class:`orderedmap.KV` pairs are written as single-key objects, date/time
values are written as ISO 8601 strings and any other iterable (generators,
sets) is written as an array.

Naive datetimes are assumed to be in :data:`orderedmap.LOCAL_TZ`.
"""

import logging
logger = logging.getLogger(__name__)

from datetime import date
from datetime import time
from datetime import datetime

try:
    import simplejson as json
    from simplejson.decoder import JSONDecodeError
except ImportError:
    import json
    JSONDecodeError = ValueError

import orderedmap
import orderedmap.const

from orderedmap.omap import KV
from orderedmap.omap import OrderedMap
from orderedmap.error import EncodingError
from orderedmap.error import ConversionError


class JsonEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, OrderedMap):
            retval = o.get_list()
            for k, _ in retval:
                if not isinstance(k, str):
                    raise TypeError("Map keys must be strings, not %r" % (k,))
            return dict(retval)

        if isinstance(o, KV):
            return {o.key: o.value}

        if isinstance(o, datetime):
            if o.tzinfo is None:
                o = orderedmap.LOCAL_TZ.localize(o)
            return o.isoformat()

        if isinstance(o, (date, time)):
            return o.isoformat()

        try:
            return super(JsonEncoder, self).default(o)

        except TypeError as e:
            if isinstance(o, (bytes, bytearray)):
                raise

            # if json can't serialize it, it's possibly a generator. If not,
            # list() raises a TypeError of its own.
            if logger.level == logging.DEBUG:
                logger.exception(e)
            return list(o)


class JsonDocument(object):
    """Writes ordered maps as json objects and parses json objects to ordered
    maps. Uses the simplejson package when available, json package otherwise.

    :param separators: Item and key separators. Defaults to
        :data:`orderedmap.const.JSON_SEPARATORS`.
    :param ensure_ascii: Escape non-ascii characters.
    :param allow_nan: Write ``nan`` and infinities as ``NaN`` and ``Infinity``
        instead of rejecting them.
    :param kwargs: Passed on to the encoder class.
    """

    mime_type = 'application/json'

    def __init__(self, separators=None, ensure_ascii=None, allow_nan=None,
                                                    encoder=JsonEncoder, **kwargs):
        if separators is None:
            separators = orderedmap.const.JSON_SEPARATORS
        if ensure_ascii is None:
            ensure_ascii = orderedmap.const.JSON_ENSURE_ASCII
        if allow_nan is None:
            allow_nan = orderedmap.const.JSON_ALLOW_NAN

        self.separators = tuple(separators)
        self.kwargs = dict(kwargs)

        self.kwargs['separators'] = self.separators
        self.kwargs['ensure_ascii'] = ensure_ascii
        self.kwargs['allow_nan'] = allow_nan
        self.kwargs.setdefault('check_circular', True)

        self.encoder = encoder(**self.kwargs)

    def encode_key(self, key):
        if not isinstance(key, str):
            raise EncodingError(key,
                        custom_msg='Map keys must be strings, not %r.')

        return self.encode_value(key)

    def encode_value(self, value):
        try:
            return self.encoder.encode(value)

        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("Encoding %r failed: %r", type(value), e)
            raise EncodingError(value, e)

    def pair_to_string(self, key, value):
        _, key_sep = self.separators

        return ''.join(('{', self.encode_key(key), key_sep,
                                                 self.encode_value(value), '}'))

    def create_out_string(self, om):
        """Returns the object-form text of ``om``: its live pairs, in order,
        as a json object."""

        item_sep, key_sep = self.separators

        retval = []
        for k, v in om.get_list():
            retval.append(self.encode_key(k) + key_sep + self.encode_value(v))

        return '{' + item_sep.join(retval) + '}'

    def create_in_document(self, in_string, in_string_encoding=None):
        """Parses ``in_string`` to an :class:`orderedmap.OrderedMap`. Every
        json object in the document becomes an ordered map."""

        if in_string_encoding is None:
            in_string_encoding = 'UTF-8'

        if isinstance(in_string, bytes):
            in_string = in_string.decode(in_string_encoding)

        try:
            retval = json.loads(in_string, object_pairs_hook=OrderedMap)

        except (JSONDecodeError, ValueError) as e:
            raise ConversionError(e)

        if not isinstance(retval, OrderedMap):
            raise ConversionError(ValueError("Expected a json object, got %r"
                                                      % (type(retval).__name__,)))

        return retval
