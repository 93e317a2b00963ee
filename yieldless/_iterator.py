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

from functools import wraps
from inspect import iscoroutinefunction

from ._continuation import nullContinuation
from ._coroutine import CoroutineHandle
from ._slot import Slot


class YieldIterator(object):
    """
    Iterates over the values a coroutine hands to 'await slot.output(value)':

        async def numbers(slot):
            await slot.output(42)
            await slot.output(12)

        slot = Slot()
        list(YieldIterator(slot, numbers(slot)))  # [42, 12]

    There is no event loop: each next() drains the Slot and otherwise resumes
    the coroutine itself, with a continuation that wakes nobody.  That is
    sufficient since the Slot is checked again after every resume.
    Exceptions from the coroutine propagate from next(); afterwards the
    iterator is exhausted.  The coroutine may only await output() of this
    Slot: nothing here would ever drain another one, so suspending on it
    closes the coroutine and raises RuntimeError.
    """

    def __init__(self, slot, coroutine):
        if not isinstance(slot, Slot):
            raise TypeError("YieldIterator() expects Slot, got %s" % repr(slot))
        self._slot = slot
        self._handle = CoroutineHandle(coroutine)

    def __iter__(self):
        return self

    def __next__(self):
        slot = self._slot
        while True:
            item = slot.drain()
            if item is not None:
                return item.value
            handle = self._handle
            if handle is None:
                raise StopIteration
            try:
                finished = handle.resume(nullContinuation)
            finally:
                if handle.isFinished():
                    self._handle = None
            if not finished and slot.isEmpty():
                handle.close()
                self._handle = None
                raise RuntimeError("Coroutine suspended on output() of another Slot")

    def close(self):
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()
        self._slot.drain()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def yielding(f):
    if not iscoroutinefunction(f):
        raise TypeError("yielding() expects coroutine function, got %s" % repr(f))
    @wraps(f)
    def helper(*args, **kwargs):
        slot = Slot()
        return YieldIterator(slot, f(slot, *args, **kwargs))
    return helper
