#!/usr/bin/env python
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
from setuptools import setup
from sys import argv

#upload to pypi with:
#python setup.py sdist upload

v = '0.1.0'
if len(argv) > 1 and argv[1].startswith("--version="):
    _, v = argv[1].split('=')
    del argv[1]

setup(
    name='yieldless',
    version=v,
    packages=[
        'yieldless',
    ],
    author='Seecr (Seek You Too B.V.)',
    author_email='info@seecr.nl',
    description='Iterate over the values a coroutine awaits output() with',
    long_description="""
Yieldless turns a coroutine that hands values to a consumer with
    await slot.output(value)
into a plain Python iterator, without an event loop.  The iterator is the scheduler: every next()
resumes the coroutine until it outputs a value or finishes.  The same suspension points work with any
scheduler that only resumes a coroutine after it was woken.
""",
    license='GNU Public License',
    platforms=['cpython'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        ],

)
