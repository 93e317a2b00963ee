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

"""
A Suspend needs the continuation its coroutine was resumed with, but await
passes nothing down.  CoroutineHandle.resume() keeps it in a local named
__continuation__ and currentContinuation() looks it up on the callstack.
Where frames cannot be trusted (or with YIELDLESS_LOOKUP=stack) a plain
stack is maintained instead.
"""

from inspect import currentframe
from os import getenv
from warnings import warn

from yieldless import cpython

useFrames = cpython
if getenv('YIELDLESS_LOOKUP') == 'stack':
    useFrames = False
    warn("Using stack lookup for currentContinuation()", stacklevel=2)

_continuations = []

def pushContinuation(continuation):
    if not useFrames:
        _continuations.append(continuation)

def popContinuation():
    if not useFrames:
        _continuations.pop()

def findContinuationInFrame(frame):
    while frame:
        f_locals = frame.f_locals
        if '__continuation__' in f_locals:
            return f_locals['__continuation__']
        frame = frame.f_back
    raise LookupError('__continuation__')

def currentContinuation():
    try:
        if useFrames:
            return findContinuationInFrame(currentframe().f_back)
        if _continuations:
            return _continuations[-1]
        raise LookupError('__continuation__')
    except LookupError:
        raise RuntimeError('output() awaited outside a resumed coroutine') from None
