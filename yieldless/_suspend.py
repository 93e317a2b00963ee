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

from ._slot import Item, Nothing
from ._local import currentContinuation


class Pending(object):
    """Sentinel handed to the resumer while a Suspend waits for its value to be drained"""
    def __new__(self):
        raise TypeError("cannot create 'Pending' instances")


class Suspend(object):
    """
    One 'await slot.output(value)'.  Polled with the continuation of whoever
    resumed the coroutine:
      1. the Slot still holds an undrained item: wake us instead of its former
         waiter and stay suspended;
      2. our value is not deposited yet: deposit it and stay suspended;
      3. our value is deposited and the Slot is empty again: done.
    Under YieldIterator, 1 never occurs; it matters for schedulers that only
    resume a coroutine after its continuation was woken.
    """

    def __init__(self, slot, value):
        self._slot = slot
        self._pending = value

    def poll(self, continuation):
        slot = self._slot
        if not slot.isEmpty():
            slot.rearm(continuation.clone())
            return False
        if self._pending is not Nothing:
            value, self._pending = self._pending, Nothing
            slot.deposit(Item(value, continuation.clone()))
            return False
        return True

    def __await__(self):
        while not self.poll(currentContinuation()):
            yield Pending
