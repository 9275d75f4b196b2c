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

"""Interfaces to the local delivery collaborators."""

__all__ = [
    'IMailboxDelivery',
    'IProcessPipe',
    ]


from zope.interface import Interface



class IMailboxDelivery(Interface):
    """Append messages to local mailboxes."""

    def deliver(data, targets):
        """Deliver a serialized message.

        Paths beginning with ``~`` or ``~user`` are expanded.  A path ending
        in a slash, or naming an existing directory, is a Maildir; anything
        else is an mbox file.

        :param data: The serialized message.
        :type data: bytes
        :param targets: The mailbox paths.  If empty, the default mailbox is
            used.
        :type targets: sequence of strings
        :return: True if at least one mailbox received the message.
        :rtype: bool
        """

    def default_mailbox():
        """Return the mailbox used when no targets are given."""



class IProcessPipe(Interface):
    """Run an external program over a message."""

    def run(program, args, data):
        """Run the program, feeding it the message on standard input.

        :param program: The program name or path.
        :type program: string
        :param args: The program's arguments.
        :type args: sequence of strings
        :param data: The serialized message.
        :type data: bytes
        :return: 2-tuple of the program's standard output and a flag which is
            True only when the program ran and exited with status zero.
        :rtype: (bytes, bool)
        """
