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

from inspect import iscoroutinefunction

from ._iterator import yielding


def _iterate(g, args, kwargs):
    if iscoroutinefunction(g):
        return yielding(g)(*args, **kwargs)
    if args or kwargs:
        raise TypeError("arguments only apply to a coroutine function, got %s" % repr(g))
    return g

def asList(g, *args, **kwargs):
    return list(_iterate(g, args, kwargs))

def consume(g, *args, **kwargs):
    for _ in _iterate(g, args, kwargs):
        pass
