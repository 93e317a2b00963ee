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

from inspect import iscoroutine

from ._local import pushContinuation, popContinuation
from ._suspend import Pending


class CoroutineHandle(object):
    """
    Owns a coroutine that only ever suspends on Slot.output().  Each resume()
    runs it up to its next suspension point, with the given continuation
    visible to that Suspend.  A finished coroutine is dropped and may not be
    resumed again.
    """

    def __init__(self, coroutine):
        if not iscoroutine(coroutine):
            raise TypeError("CoroutineHandle() expects coroutine, got %s" % repr(coroutine))
        self._coroutine = coroutine
        self._running = False

    def isFinished(self):
        return self._coroutine is None

    def resume(self, continuation):
        """Returns True when the coroutine finished, False when it is suspended."""
        assert self._coroutine is not None, 'Coroutine already finished.'
        assert not self._running, 'Coroutine already running.'
        __continuation__ = continuation # found by currentContinuation()
        pushContinuation(continuation)
        self._running = True
        try:
            response = self._coroutine.send(None)
        except StopIteration:
            self._coroutine = None
            return True
        except BaseException:
            self._coroutine = None
            raise
        finally:
            self._running = False
            popContinuation()
        if response is not Pending:
            self.close()
            raise TypeError("Coroutine yielded %s instead of suspending on output()" % repr(response))
        return False

    def close(self):
        coroutine, self._coroutine = self._coroutine, None
        if coroutine is not None:
            coroutine.close()
