## begin license ##
#
# "Yieldless" turns coroutines that await output() into plain iterators.
#
# Copyright (C) 2026 Seecr (Seek You Too B.V.) https://seecr.nl
#
# This file is part of "Yieldless"
#
# "Yieldless" is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# "Yieldless" is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with "Yieldless"; if not, write to the Free Software
# Foundation, Inc., 51 Franklin St, Fifth Floor, Boston, MA  02110-1301  USA
#
## end license ##


class Nothing(object):
    """Sentinel for an empty payload; None is a valid value to output()"""
    def __new__(self):
        raise TypeError("cannot create 'Nothing' instances")


class Item(object):
    __slots__ = ('value', 'continuation')

    def __init__(self, value, continuation):
        self.value = value
        self.continuation = continuation

    def __repr__(self):
        return 'Item(%s, %s)' % (repr(self.value), repr(self.continuation))


class Slot(object):
    """
    Single-item mailbox between a producing coroutine and the one consuming its
    values.  Producer and consumer strictly alternate, so there is no lock; a
    second deposit before the first one is drained is a protocol violation.

    The producer side writes:
        await slot.output(value)
    which returns once the value was drained.  The consumer side reads with
    drain() or take().
    """

    def __init__(self):
        self._item = None

    def output(self, value):
        return Suspend(self, value)

    def isEmpty(self):
        return self._item is None

    def deposit(self, item):
        assert self._item is None, 'Slot already occupied.'
        self._item = item

    def rearm(self, continuation):
        assert self._item is not None, 'Slot is empty.'
        self._item.continuation = continuation

    def drain(self):
        item, self._item = self._item, None
        if item is not None:
            item.continuation.resume()
        return item

    def take(self):
        item = self.drain()
        if item is None:
            return Nothing
        return item.value

    def __repr__(self):
        return 'Slot(%s)' % ('' if self._item is None else repr(self._item))


from ._suspend import Suspend # circular
