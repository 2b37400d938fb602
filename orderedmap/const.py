
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

"""The ``orderedmap.const`` module contains the default values used by the
serializers. Protocol constructors accept keyword arguments that override
them per instance."""


JSON_SEPARATORS = (',', ':')
"""Item and key separators of the object-form text. The compact default
renders maps as ``{"a":1,"b":2}``."""

JSON_ENSURE_ASCII = False
"""When True, non-ascii characters in keys and strings are escaped as
``\\uXXXX`` sequences."""

JSON_ALLOW_NAN = False
"""When False, ``nan`` and the infinities are rejected instead of being
written as the non-standard ``NaN`` and ``Infinity`` tokens."""

YAML_INDENT = 4
"""Indentation width of the yaml output."""

YAML_DEFAULT_FLOW_STYLE = False
"""Passed to ``yaml.dump``. False means block style for all collections."""

YAML_ALLOW_UNICODE = True
"""Passed to ``yaml.dump``. Lets non-ascii text through unescaped."""

DISPLAY_ON_ERROR = ''
"""What ``str()`` returns for an ordered map that can not be serialized."""

WARN_ON_DUPLICATE_FAULTCODE = True
"""Warn about duplicate faultcodes in all Fault subclasses globally. Only works
when CODE class attribute is set for every Fault subclass."""
