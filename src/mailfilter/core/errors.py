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

"""mailfilter exceptions.

Delivery and pipe failures are not normally seen by filter scripts; the
session routes them through its recovery cascade.  The one exception a
filter script is expected to let escape is `RejectMessage`, which the
environment turns into a bounce.
"""

__all__ = [
    'AbandonedSession',
    'ConfigurationError',
    'DeliveryFailure',
    'MailFilterError',
    'MailFilterException',
    'PipeFailure',
    'RejectMessage',
    'UnhandledMessageWarning',
    ]


from mailfilter.interfaces.session import ExitStatus



class MailFilterException(Exception):
    pass



class MailFilterError(MailFilterException):
    """Base class for all mailfilter errors."""



class DeliveryFailure(MailFilterError):
    """The message could not be written to a mailbox."""

    def __init__(self, mailbox, reason=None):
        super().__init__(mailbox, reason)
        self.mailbox = mailbox
        self.reason = reason

    def __str__(self):
        if self.reason is None:
            return 'Delivery to {0} failed'.format(self.mailbox)
        return 'Delivery to {0} failed: {1}'.format(self.mailbox, self.reason)


class PipeFailure(MailFilterError):
    """An external program could not be run, or exited non-zero."""

    def __init__(self, program, status=None):
        super().__init__(program, status)
        self.program = program
        # None when the program could not even be launched.
        self.status = status

    def __str__(self):
        if self.status is None:
            return 'Could not run {0}'.format(self.program)
        return '{0} exited with status {1}'.format(self.program, self.status)


class AbandonedSession(MailFilterError):
    """A session was closed before any terminal action decided its fate."""


class ConfigurationError(MailFilterError):
    """A configured dotted name could not be loaded or is of the wrong kind."""

    def __init__(self, key, name, reason):
        super().__init__(key, name, reason)
        self.key = key
        self.name = name
        self.reason = reason

    def __str__(self):
        return '{0}: {1}: {2}'.format(self.key, self.name, self.reason)



class RejectMessage(MailFilterException):
    """The message will be bounced back to the sender.

    This is not an error from the filter's point of view.  It carries the
    optional human readable reason for the bounce and the process exit status
    the MTA understands as "reject".
    """

    status = ExitStatus.rejected

    def __init__(self, reason=None):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return ('' if self.reason is None else self.reason)



class UnhandledMessageWarning(UserWarning):
    """The recovery cascade gave up without terminating the process."""
