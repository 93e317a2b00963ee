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

VERSION='$Version: x.y.z$'[9:-1].strip() # Modified by package scripts

import platform
if hasattr(platform, 'python_implementation'):
    cpython = platform.python_implementation() == "CPython"
elif hasattr(platform, 'system'):
    cpython = platform.system() != "Java"
else:
    cpython = False

from ._continuation import Continuation, NullContinuation, CallbackContinuation, nullContinuation
from ._slot import Slot, Item, Nothing
from ._suspend import Suspend, Pending
from ._local import currentContinuation
from ._coroutine import CoroutineHandle
from ._iterator import YieldIterator, yielding
from .utils import asList, consume
