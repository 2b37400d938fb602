
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

from warnings import warn
from collections import defaultdict

import orderedmap.const


class FaultMeta(type):
    def __init__(self, cls_name, cls_bases, cls_dict):
        super(FaultMeta, self).__init__(cls_name, cls_bases, cls_dict)

        code = cls_dict.get('CODE', None)

        if code is not None:
            target = Fault.REGISTERED[code]
            target.add(self)
            if orderedmap.const.WARN_ON_DUPLICATE_FAULTCODE and len(target) > 1:
                warn("Duplicate faultcode {} detected for classes {}"
                                                          .format(code, target))


class Fault(Exception, metaclass=FaultMeta):
    """Use this class as a base for all public exceptions. It has three main
    attributes:

    :param faultcode: It's a dot-delimited string whose first fragment is
        either 'Client' or 'Server'. 'Client' indicates that something was
        wrong with what the caller passed in, and 'Server' indicates something
        went wrong in a collaborator while handling otherwise legitimate input.
    :param faultstring: It's the human-readable explanation of the exception.
    :param detail: Additional information, usually the repr of the offending
        object.
    """

    REGISTERED = defaultdict(set)
    """Class-level variable that holds a multimap of all fault codes and the
    associated classes."""

    CODE = None

    def __init__(self, faultcode='Server', faultstring="", detail=None):
        super(Fault, self).__init__(faultcode, faultstring)

        self.faultcode = faultcode
        self.faultstring = faultstring or self.__class__.__name__
        self.detail = detail

    def __str__(self):
        return repr(self)

    def __repr__(self):
        if self.detail is None:
            return "%s(%s: %r)" % (self.__class__.__name__,
                                               self.faultcode, self.faultstring)

        return "%s(%s: %r detail: %r)" % (self.__class__.__name__,
                                  self.faultcode, self.faultstring, self.detail)

    def __reduce__(self):
        # subclass constructors do not take Exception.args
        state = dict(self.__dict__)
        state['args'] = self.args
        return _new_fault, (self.__class__,), state

    def to_dict(self):
        retval = {
            "faultcode": self.faultcode,
            "faultstring": self.faultstring,
        }

        if self.detail is not None:
            retval["detail"] = self.detail

        return retval


def _new_fault(cls):
    return cls.__new__(cls)
