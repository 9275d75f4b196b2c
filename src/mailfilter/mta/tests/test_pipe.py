# Copyright (C) 2026 by the mailfilter developers.
#
# This file is part of mailfilter.
#
# mailfilter is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailfilter is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailfilter.  If not, see <http://www.gnu.org/licenses/>.

"""Test running external programs."""

__all__ = [
    'TestProcessPipe',
    ]


import sys
import unittest

from zope.interface.verify import verifyObject

from mailfilter.app.session import FilterSession
from mailfilter.interfaces.mta import IProcessPipe
from mailfilter.mta.pipe import ProcessPipe
from mailfilter.testing.helpers import FakeDelivery
from mailfilter.testing.layers import ConfigLayer


SOURCE = b"""\
From: anne@example.org
Subject: Piped

Some text.
"""

# A small program that upper cases its input.
UPPER = 'import sys; sys.stdout.write(sys.stdin.read().upper())'



class TestProcessPipe(unittest.TestCase):
    """Test the subprocess based pipe."""

    layer = ConfigLayer

    def setUp(self):
        self._pipe = ProcessPipe()

    def test_verify_interface(self):
        self.assertTrue(verifyObject(IProcessPipe, self._pipe))

    def test_output(self):
        output, succeeded = self._pipe.run(
            sys.executable, ['-c', UPPER], SOURCE)
        self.assertTrue(succeeded)
        self.assertEqual(output, SOURCE.upper())

    def test_non_zero_exit(self):
        output, succeeded = self._pipe.run(
            sys.executable, ['-c', 'import sys; sys.exit(3)'], SOURCE)
        self.assertFalse(succeeded)
        self.assertEqual(output, b'')

    def test_program_ignoring_input(self):
        output, succeeded = self._pipe.run(
            sys.executable, ['-c', 'print("done")'], SOURCE * 10000)
        self.assertTrue(succeeded)
        self.assertEqual(output.strip(), b'done')

    def test_missing_program(self):
        output, succeeded = self._pipe.run(
            '/nonexistent/program/for/mailfilter', [], SOURCE)
        self.assertFalse(succeeded)
        self.assertEqual(output, b'')

    def test_session_chaining(self):
        # A session piping through a transformation can replace its message
        # with the output and carry on.
        session = FilterSession(data=SOURCE, noexit=True,
                                delivery=FakeDelivery(), pipe=self._pipe)
        session.message = session.pipe(sys.executable, '-c', UPPER)
        self.assertEqual(session.subject, 'PIPED')

    def test_session_missing_program(self):
        # Failing to launch the program is the same as a non-zero exit.
        session = FilterSession(data=SOURCE, noexit=True,
                                delivery=FakeDelivery(), pipe=self._pipe)
        self.assertEqual(
            session.pipe('/nonexistent/program/for/mailfilter'), None)
        self.assertFalse(session.delivered)
        self.assertFalse(session.gave_up)
