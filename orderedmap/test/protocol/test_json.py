#!/usr/bin/env python
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

import logging
import unittest
try:
    import simplejson as json
except ImportError:
    import json

from datetime import date
from datetime import datetime

import pytz

from orderedmap import KV
from orderedmap import OrderedMap
from orderedmap.error import EncodingError
from orderedmap.error import ConversionError
from orderedmap.protocol.json import JsonDocument


class TestJsonOut(unittest.TestCase):
    def test_empty(self):
        assert OrderedMap().to_json() == '{}'
        assert str(OrderedMap()) == '{}'

    def test_order(self):
        om = OrderedMap([('b', 2), ('a', 1)])
        s = om.to_json()

        assert s == '{"b":2,"a":1}'
        assert s.index('"b"') < s.index('"a"')

    def test_tombstones_skipped(self):
        om = OrderedMap([('a', 1), ('b', 2), ('c', 3)])
        om.delete('a')
        om.delete('c')

        assert om.to_json() == '{"b":2}'

    def test_scalars(self):
        om = OrderedMap([
            ('s', 'text'),
            ('i', 42),
            ('f', 1.5),
            ('t', True),
            ('n', None),
            ('l', [1, 'two', None]),
        ])

        assert om.to_json() == \
              '{"s":"text","i":42,"f":1.5,"t":true,"n":null,"l":[1,"two",null]}'

    def test_key_escaping(self):
        om = OrderedMap([('a"b', 1), ('back\\slash', 2), ('new\nline', 3)])

        assert om.to_json() == '{"a\\"b":1,"back\\\\slash":2,"new\\nline":3}'

    def test_unicode(self):
        om = OrderedMap([(u'kü', u'ç')])

        assert om.to_json() == u'{"kü":"ç"}'
        assert JsonDocument(ensure_ascii=True).create_out_string(om) == \
                                                   '{"k\\u00fc":"\\u00e7"}'

    def test_nested_map_keeps_order(self):
        inner = OrderedMap([('z', 1), ('y', 2)])
        om = OrderedMap([('b', inner), ('a', [inner, {'k': 'v'}])])

        assert om.to_json() == \
                          '{"b":{"z":1,"y":2},"a":[{"z":1,"y":2},{"k":"v"}]}'

    def test_nested_map_tombstones(self):
        inner = OrderedMap([('z', 1), ('y', 2)])
        inner.delete('z')

        assert OrderedMap([('a', inner)]).to_json() == '{"a":{"y":2}}'

    def test_kv_value(self):
        om = OrderedMap([('pair', KV('k', 1))])

        assert om.to_json() == '{"pair":{"k":1}}'

    def test_datetime(self):
        om = OrderedMap([
            ('naive', datetime(2020, 1, 2, 3, 4, 5)),
            ('aware', pytz.timezone('Europe/Istanbul')
                                    .localize(datetime(2020, 1, 2, 3, 4, 5))),
            ('date', date(2020, 1, 2)),
        ])

        assert om.to_json() == '{"naive":"2020-01-02T03:04:05+00:00",' \
                                '"aware":"2020-01-02T03:04:05+03:00",' \
                                '"date":"2020-01-02"}'

    def test_generator(self):
        om = OrderedMap([('g', (i * 2 for i in range(3)))])

        assert om.to_json() == '{"g":[0,2,4]}'

    def test_separators(self):
        om = OrderedMap([('a', 1), ('b', [1, 2])])
        prot = JsonDocument(separators=(', ', ': '))

        assert om.to_json(prot) == '{"a": 1, "b": [1, 2]}'

    def test_round_trip(self):
        om = OrderedMap([('zeta', 1), ('alpha', 'a'), ('mid', 2.5),
                                                   ('t', False), ('n', None)])
        om.delete('mid')
        om.set('mid', [1, 2])

        pairs = json.loads(om.to_json(), object_pairs_hook=list)

        assert pairs == [tuple(kv) for kv in om.get_list()]


class TestJsonErrors(unittest.TestCase):
    def test_unsupported_value(self):
        om = OrderedMap([('a', 1), ('b', object())])

        try:
            om.to_json()
        except EncodingError as e:
            assert e.faultcode == 'Client.EncodingError'
            assert e.orig_exc is not None
        else:
            raise Exception("must fail")

    def test_function_value(self):
        om = OrderedMap([('f', lambda: None)])

        self.assertRaises(EncodingError, om.to_json)

    def test_nan(self):
        om = OrderedMap([('nan', float('nan'))])
        self.assertRaises(EncodingError, om.to_json)

        om = OrderedMap([('inf', float('inf'))])
        self.assertRaises(EncodingError, om.to_json)

        s = om.to_json(JsonDocument(allow_nan=True))
        assert s == '{"inf":Infinity}'

    def test_non_string_key(self):
        om = OrderedMap([(1, 'one')])

        self.assertRaises(EncodingError, om.to_json)

    def test_nested_non_string_key(self):
        om = OrderedMap([('a', OrderedMap([(1, 'x'), ('1', 'y')]))])
        self.assertRaises(EncodingError, om.to_json)

        om = OrderedMap([('a', [OrderedMap([(None, 1)])])])
        self.assertRaises(EncodingError, om.to_json)
        self.assertRaises(EncodingError, om.to_yaml)

    def test_cycle(self):
        om = OrderedMap([('a', 1)])
        om.set('self', om)

        self.assertRaises(EncodingError, om.to_json)

    def test_nested_failure(self):
        om = OrderedMap([('inner', OrderedMap([('x', object())]))])

        self.assertRaises(EncodingError, om.to_json)

    def test_str_swallows_error(self):
        om = OrderedMap([('b', object())])

        with self.assertLogs('orderedmap.omap', level=logging.WARNING):
            assert str(om) == ''

        self.assertRaises(EncodingError, om.to_json)


class TestJsonIn(unittest.TestCase):
    def test_parse(self):
        prot = JsonDocument()
        om = prot.create_in_document('{"b":1,"a":{"z":[1,{"y":2,"x":3}],"c":2}}')

        assert isinstance(om, OrderedMap)
        assert om.get_keys() == ['b', 'a']
        assert om.get('a').get_keys() == ['z', 'c']
        assert om.get('a').get('z')[1].get_keys() == ['y', 'x']

    def test_parse_bytes(self):
        om = JsonDocument().create_in_document(b'{"k\xc3\xbc":1}')

        assert om.get_keys() == [u'kü']

    def test_reparse(self):
        s = '{"x":3,"z":[1,2,{"b":null,"a":true}],"y":"s"}'
        prot = JsonDocument()

        assert prot.create_out_string(prot.create_in_document(s)) == s

    def test_malformed(self):
        self.assertRaises(ConversionError,
                                     JsonDocument().create_in_document, '{"a":')

    def test_not_an_object(self):
        try:
            JsonDocument().create_in_document('[1, 2]')
        except ConversionError as e:
            assert e.faultcode == 'Server.ConversionError'
        else:
            raise Exception("must fail")


if __name__ == '__main__':
    unittest.main()
