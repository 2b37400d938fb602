
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

"""The ``orderedmap.protocol.yaml`` module contains :class:`YamlDocument`, the
protocol that derives yaml text from the json text of an ordered map, using
the PyYaml package.

The yaml text is not generated from the map directly: the map is first
written as json, the json is parsed back with every object turned into an
ordered map, and the result is dumped as yaml with key order kept.
"""

import logging
logger = logging.getLogger(__name__)

import yaml

from yaml import YAMLError
from yaml.constructor import ConstructorError
from yaml.resolver import BaseResolver
try:
    from yaml import CLoader as Loader
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as SafeLoader
    from yaml import CSafeDumper as SafeDumper

except ImportError:
    from yaml import Loader
    from yaml import Dumper
    from yaml import SafeLoader
    from yaml import SafeDumper

import orderedmap.const

from orderedmap.omap import OrderedMap
from orderedmap.error import ConversionError
from orderedmap.protocol.json import JsonDocument


class YamlDocument(object):
    """Writes ordered maps as yaml and parses yaml mappings to ordered maps.

    :param safe: Use the safe loader and dumper classes. This is not a security
        feature, search for 'safe_dump' in
        http://www.pyyaml.org/wiki/PyYAMLDocumentation
    :param encoding: When set, outputs are ``bytes`` in this encoding instead
        of ``str``.
    :param json_protocol: The :class:`JsonDocument` instance that produces the
        json text. A default one is created when omitted.
    :param kwargs: See the yaml documentation in ``dump``.

    ``indent`` and ``default_flow_style`` default to
    :data:`orderedmap.const.YAML_INDENT` and
    :data:`orderedmap.const.YAML_DEFAULT_FLOW_STYLE`.
    """

    mime_type = 'text/yaml'

    def __init__(self, safe=True, encoding=None, allow_unicode=None,
                                                 json_protocol=None, **kwargs):
        if allow_unicode is None:
            allow_unicode = orderedmap.const.YAML_ALLOW_UNICODE

        if json_protocol is None:
            json_protocol = JsonDocument()

        self.json_protocol = json_protocol

        loader = Loader
        dumper = Dumper
        if safe:
            loader = SafeLoader
            dumper = SafeDumper

        class _OrderedMapLoader(loader):
            pass

        class _OrderedMapDumper(dumper):
            pass

        _OrderedMapLoader.add_constructor(
                      BaseResolver.DEFAULT_MAPPING_TAG, _ordered_map_loader)
        _OrderedMapDumper.add_representer(OrderedMap, _ordered_map_dumper)

        # yaml.load takes nothing but the loader class
        self.in_kwargs = dict(Loader=_OrderedMapLoader)
        self.out_kwargs = dict(kwargs)

        self.out_kwargs['Dumper'] = _OrderedMapDumper

        self.out_kwargs['encoding'] = encoding
        self.out_kwargs['allow_unicode'] = allow_unicode

        if not 'indent' in self.out_kwargs:
            self.out_kwargs['indent'] = orderedmap.const.YAML_INDENT

        if not 'default_flow_style' in self.out_kwargs:
            self.out_kwargs['default_flow_style'] = \
                                       orderedmap.const.YAML_DEFAULT_FLOW_STYLE

    def json_to_yaml(self, json_string):
        """Converts json text to yaml text, keeping the key order of every
        object."""

        doc = self.json_protocol.create_in_document(json_string)

        try:
            return yaml.dump(doc, **self.out_kwargs)

        except YAMLError as e:
            raise ConversionError(e)

    def create_out_string(self, om):
        """Returns the yaml text of ``om``."""

        json_string = self.json_protocol.create_out_string(om)
        logger.debug("Converting %d bytes of json to yaml", len(json_string))

        return self.json_to_yaml(json_string)

    def create_in_document(self, in_string, in_string_encoding=None):
        """Parses ``in_string`` to an :class:`orderedmap.OrderedMap`."""

        if in_string_encoding is None:
            in_string_encoding = 'UTF-8'

        if isinstance(in_string, bytes):
            in_string = in_string.decode(in_string_encoding)

        try:
            retval = yaml.load(in_string, **self.in_kwargs)

        except YAMLError as e:
            raise ConversionError(e)

        if not isinstance(retval, OrderedMap):
            raise ConversionError(ValueError("Expected a yaml mapping, got %r"
                                                      % (type(retval).__name__,)))

        return retval


def _ordered_map_loader(loader, node):
    loader.flatten_mapping(node)

    try:
        return OrderedMap(loader.construct_pairs(node))

    except TypeError as e:
        raise ConstructorError("while constructing a mapping",
                node.start_mark, "found unhashable key (%s)" % e, node.start_mark)


def _ordered_map_dumper(dumper, data):
    # a list of pairs is never sorted by the representer
    return dumper.represent_mapping(BaseResolver.DEFAULT_MAPPING_TAG,
                                             [tuple(kv) for kv in data.get_list()])
