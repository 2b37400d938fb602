
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


"""The ``orderedmap.error`` module contains the exceptions the serializers
raise. Nothing else in the package raises on documented input.
"""

from orderedmap.fault import Fault


class EncodingError(Fault):
    """Raised when a key or a value can not be converted to json."""

    CODE = 'Client.EncodingError'

    def __init__(self, obj, orig_exc=None,
                               custom_msg='The value %r could not be encoded.'):
        try:
            msg = custom_msg % (obj,)
        except TypeError:
            msg = custom_msg

        if orig_exc is not None:
            msg = "%s (%s)" % (msg, orig_exc)

        super(EncodingError, self).__init__(self.CODE, msg, detail=repr(obj))

        self.orig_exc = orig_exc


class ConversionError(Fault):
    """Raised when a document could not be converted between json and yaml, or
    could not be parsed at all."""

    CODE = 'Server.ConversionError'

    def __init__(self, orig_exc, faultstring="Conversion failed: %r"):
        try:
            faultstring = faultstring % (orig_exc,)
        except TypeError:
            pass

        super(ConversionError, self).__init__(self.CODE, faultstring)

        self.orig_exc = orig_exc
