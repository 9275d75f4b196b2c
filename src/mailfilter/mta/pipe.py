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

"""Run external programs over a message."""

__all__ = [
    'ProcessPipe',
    ]


import logging
import subprocess

from zope.interface import implementer

from mailfilter.core.errors import PipeFailure
from mailfilter.interfaces.mta import IProcessPipe


log = logging.getLogger('mailfilter.pipe')



@implementer(IProcessPipe)
class ProcessPipe:
    """Feed a message to a program's stdin and collect its stdout.

    The program is run directly, not through a shell.  Its standard error is
    passed through untouched, so whatever it complains about ends up wherever
    the filter's own standard error goes.
    """

    def run(self, program, args, data):
        """See `IProcessPipe`."""
        command = [program]
        command.extend(args)
        try:
            output = self._communicate(command, data)
        except PipeFailure as error:
            log.error('%s', error)
            return b'', False
        return output, True

    def _communicate(self, command, data):
        """Run the command to completion.

        :return: The command's standard output.
        :raises PipeFailure: when the command cannot be started or exits
            with a non-zero status.
        """
        program = command[0]
        try:
            proc = subprocess.Popen(
                command, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
        except OSError as error:
            log.error('%s: %s', program, error)
            raise PipeFailure(program) from error
        # A program which exits without reading all of its input is judged
        # by its exit status alone.
        stdout, stderr = proc.communicate(data)
        if proc.returncode != 0:
            raise PipeFailure(program, proc.returncode)
        log.info('%s: exited with status 0', program)
        return stdout
