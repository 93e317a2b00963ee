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

from os.path import abspath, dirname
from sys import path as sysPath
sysPath.insert(0, dirname(dirname(abspath(__file__))))

from unittest import main

from continuationtest import ContinuationTest
from coroutinehandletest import CoroutineHandleTest, CoroutineHandleStackLookupTest
from localtest import LocalTest, LocalFramesTest, LocalStackTest
from schedulingtest import SchedulingTest, SchedulingStackLookupTest
from slottest import SlotTest
from suspendtest import SuspendTest, SuspendStackLookupTest
from utilstest import UtilsTest
from yielditeratortest import YieldIteratorTest, YieldIteratorStackLookupTest, YieldingTest

if __name__ == '__main__':
    main()
