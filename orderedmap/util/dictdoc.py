
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

from orderedmap.protocol.json import JsonDocument
from orderedmap.protocol.yaml import YamlDocument


def get_map_as_json(om, protocol=JsonDocument, protocol_inst=None, **kwargs):
    if protocol_inst is None:
        protocol_inst = protocol(**kwargs)

    return protocol_inst.create_out_string(om)


def get_map_as_yaml(om, protocol=YamlDocument, protocol_inst=None, **kwargs):
    if protocol_inst is None:
        protocol_inst = protocol(**kwargs)

    return protocol_inst.create_out_string(om)


def json_loads(s, protocol=JsonDocument, **kwargs):
    if s is None:
        return None
    if s == '':
        return None
    prot = protocol(**kwargs)
    return prot.create_in_document(s)


get_json_as_map = json_loads


def yaml_loads(s, protocol=YamlDocument, **kwargs):
    if s is None:
        return None
    if s == '':
        return None
    prot = protocol(**kwargs)
    return prot.create_in_document(s)


get_yaml_as_map = yaml_loads
