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

from testcase import YieldlessTestCase

from yieldless import Slot, Item, Nothing, CallbackContinuation, nullContinuation


class SlotTest(YieldlessTestCase):

    def testNewSlotIsEmpty(self):
        slot = Slot()
        self.assertTrue(slot.isEmpty())
        self.assertEqual(None, slot.drain())
        self.assertEqual(Nothing, slot.take())

    def testDepositAndDrain(self):
        slot = Slot()
        item = Item(42, nullContinuation)
        slot.deposit(item)
        self.assertFalse(slot.isEmpty())
        self.assertTrue(item is slot.drain())
        self.assertTrue(slot.isEmpty())
        self.assertEqual(None, slot.drain())

    def testDepositIntoOccupiedSlot(self):
        slot = Slot()
        slot.deposit(Item(1, nullContinuation))
        try:
            slot.deposit(Item(2, nullContinuation))
            self.fail('AssertionError not raised')
        except AssertionError as e:
            self.assertEqual('Slot already occupied.', str(e))
        self.assertEqual(1, slot.take())

    def testDrainWakesContinuation(self):
        woken = []
        slot = Slot()
        slot.deposit(Item('value', CallbackContinuation(lambda: woken.append(True))))
        self.assertEqual([], woken)
        self.assertEqual('value', slot.take())
        self.assertEqual([True], woken)
        self.assertEqual(Nothing, slot.take())
        self.assertEqual([True], woken)

    def testNoneIsAValue(self):
        slot = Slot()
        slot.deposit(Item(None, nullContinuation))
        self.assertEqual(None, slot.take())
        self.assertEqual(Nothing, slot.take())

    def testRearmReplacesContinuation(self):
        woken = []
        slot = Slot()
        slot.deposit(Item(1, CallbackContinuation(lambda: woken.append('first'))))
        slot.rearm(CallbackContinuation(lambda: woken.append('second')))
        self.assertEqual(1, slot.take())
        self.assertEqual(['second'], woken)

    def testRearmEmptySlot(self):
        self.assertRaises(AssertionError, Slot().rearm, nullContinuation)

    def testNothingCannotBeInstantiated(self):
        self.assertRaises(TypeError, Nothing)

    def testRepr(self):
        slot = Slot()
        self.assertEqual('Slot()', repr(slot))
        slot.deposit(Item(42, nullContinuation))
        self.assertEqual('Slot(Item(42, nullContinuation))', repr(slot))
