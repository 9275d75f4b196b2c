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

"""Interfaces for filter sessions."""

__all__ = [
    'ExitStatus',
    'IFilterSession',
    ]


from enum import IntEnum
from zope.interface import Attribute, Interface



class ExitStatus(IntEnum):
    # The message was fully handled; the MTA should not retry.
    delivered = 0
    # Temporary failure; the MTA should requeue the message and retry later.
    tempfail = 75
    # The MTA should bounce the message to its sender.
    rejected = 100



class IFilterSession(Interface):
    """The processing of one incoming message."""

    message = Attribute(
        """The message being filtered.

        This may be replaced wholesale, e.g. with the output of `pipe()`.
        """)

    emergency = Attribute(
        'The mailbox tried by the recovery cascade, or None.')

    noexit = Attribute(
        """Exit policy flag.

        When false (the default), terminal actions end the process with an
        `ExitStatus`.  When true, control returns to the caller.
        """)

    delivered = Attribute(
        'True once a terminal action has definitively succeeded.')

    gave_up = Attribute(
        'True once the recovery cascade has run out of options.')

    hooks = Attribute('The `IHookRegistry` for this session.')

    def accept(*targets):
        """Deliver the message to the given mailboxes.

        :param targets: Mailbox paths.  When none are given, the delivery
            agent's default mailbox is used.
        :return: True if the message was delivered and the process was not
            terminated, otherwise False.
        """

    def reject(reason=None):
        """Bounce the message back to its sender.

        :param reason: Optional text to include in the bounce.
        :raises RejectMessage: always.
        """

    def pipe(program, *args):
        """Feed the message to an external program.

        :param program: The program to run.
        :param args: Its arguments.
        :return: The program's standard output as bytes on success, or None
            on failure when the process is not terminated.
        """

    def ignore():
        """Discard the message, counting this as a successful delivery."""

    def close():
        """Finish the session.

        If no terminal action decided the fate of the message, run the
        recovery cascade.
        """
