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

"""Local mailbox delivery.

Messages are appended to mbox files or dropped into Maildirs.  Which kind a
mailbox is depends only on its path: a path ending in a slash, or naming an
existing directory, is a Maildir; anything else is an mbox file.
"""

__all__ = [
    'LocalDelivery',
    'expand_mailbox',
    'is_maildir',
    ]


import os
import pwd
import logging
import mailbox

from zope.interface import implementer

from mailfilter.config import config
from mailfilter.core.errors import DeliveryFailure
from mailfilter.interfaces.mta import IMailboxDelivery
from mailfilter.utilities.filesystem import makedirs
from mailfilter.utilities.mailbox import Maildir, Mbox


log = logging.getLogger('mailfilter.delivery')



def expand_mailbox(mailbox):
    """Resolve the ~ and ~user prefixes of a mailbox path.

    A trailing slash is significant, so it is preserved.
    """
    return os.path.expanduser(mailbox)


def is_maildir(mailbox):
    """Is the given (expanded) mailbox path a Maildir?"""
    return mailbox.endswith(os.sep) or os.path.isdir(mailbox)


def _username():
    """The name of the user whose mail is being delivered."""
    for variable in ('LOGNAME', 'USER'):
        name = os.environ.get(variable)
        if name:
            return name
    return pwd.getpwuid(os.getuid()).pw_name



@implementer(IMailboxDelivery)
class LocalDelivery:
    """Deliver to mbox files and Maildirs on the local file system."""

    def default_mailbox(self):
        """See `IMailboxDelivery`.

        In order: $MAIL, the user's mailbox in the first configured spool
        directory that exists, then the default Maildir.
        """
        mail = os.environ.get('MAIL')
        if mail:
            return mail
        user = _username()
        for directory in config.spool_directories:
            if os.path.isdir(directory):
                return os.path.join(directory, user)
        return config.delivery.default_maildir

    def deliver(self, data, targets):
        """See `IMailboxDelivery`."""
        if not targets:
            targets = [self.default_mailbox()]
        delivered = []
        for target in targets:
            path = expand_mailbox(target)
            try:
                self._deliver_to(path, data)
            except DeliveryFailure as error:
                log.error('%s', error)
            else:
                log.info('delivered to %s', path)
                delivered.append(path)
        return len(delivered) > 0

    def _deliver_to(self, path, data):
        """Deliver the data to a single mailbox.

        :raises DeliveryFailure: when the mailbox cannot be written.
        """
        try:
            if is_maildir(path):
                self._deliver_to_maildir(path, data)
            else:
                self._deliver_to_mbox(path, data)
        # mailbox.Error covers e.g. an mbox already locked by someone else.
        except (OSError, mailbox.Error) as error:
            raise DeliveryFailure(path, error) from error

    def _deliver_to_maildir(self, path, data):
        # mailbox.Maildir creates the cur, new and tmp subdirectories, but not
        # any missing parents.
        parent = os.path.dirname(path.rstrip(os.sep))
        if parent:
            makedirs(parent)
        with Maildir(path, factory=None, create=True) as maildir:
            maildir.add(data)

    def _deliver_to_mbox(self, path, data):
        parent = os.path.dirname(path)
        if parent:
            makedirs(parent)
        with Mbox(path, factory=None, create=True) as mbox:
            mbox.add(data)

