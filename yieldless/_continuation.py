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

import sys
from traceback import print_exc


class Continuation(object):
    """
    Capability to wake one suspended coroutine.  A Suspend stores a clone of the
    continuation it was resumed with next to the value it deposits; draining the
    Slot calls resume() on it.
    """
    def resume(self):
        raise NotImplementedError()

    def clone(self):
        raise NotImplementedError()


class NullContinuation(Continuation):
    """
    Wakes nobody.  Only valid for a driver that re-checks the Slot after every
    resume of the coroutine, like YieldIterator does.
    """
    def resume(self):
        pass

    def clone(self):
        return nullContinuation

    def __eq__(self, other):
        return isinstance(other, NullContinuation)

    def __hash__(self):
        return hash(NullContinuation)

    def __repr__(self):
        return 'nullContinuation'

nullContinuation = NullContinuation()


class CallbackContinuation(Continuation):
    def __init__(self, callback):
        if not callable(callback):
            raise TypeError("CallbackContinuation() expects callable, got %s" % repr(callback))
        self._callback = callback

    def resume(self):
        try:
            self._callback()
        except (AssertionError, KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            sys.stderr.write("Unexpected exception raised on continuation callback (ignored):\n")
            print_exc()

    def clone(self):
        return self

    def __repr__(self):
        return 'CallbackContinuation(%s)' % repr(self._callback)
