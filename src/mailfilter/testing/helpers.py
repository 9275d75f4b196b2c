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

"""Various test helpers."""

__all__ = [
    'FakeDelivery',
    'FakePipe',
    'event_subscribers',
    'specialized_message_from_string',
    ]


from contextlib import contextmanager
from zope import event
from zope.interface import implementer

from mailfilter.email.message import parse
from mailfilter.interfaces.mta import IMailboxDelivery, IProcessPipe



@contextmanager
def event_subscribers(*subscribers):
    """Temporarily set the Zope event subscribers list.

    :param subscribers: A sequence of event subscribers.
    :type subscribers: sequence of callables, each receiving one argument, the
        event.
    """
    old_subscribers = event.subscribers[:]
    event.subscribers[:] = list(subscribers)
    try:
        yield
    finally:
        event.subscribers[:] = old_subscribers



def specialized_message_from_string(text):
    """Parse text into a message object.

    The text must be ASCII-only.  It is converted to bytes first, just like
    what an MTA hands to a filter.
    """
    return parse(text.encode('ascii'))



@implementer(IMailboxDelivery)
class FakeDelivery:
    """Record deliveries instead of writing mailboxes.

    Deliveries to any of the `failing` mailboxes fail; so do all deliveries
    when `failing` is True.
    """

    DEFAULT = '/var/mail/default'

    def __init__(self, failing=()):
        self.failing = failing
        self.attempts = []
        self.delivered = []

    def default_mailbox(self):
        return self.DEFAULT

    def deliver(self, data, targets):
        targets = (list(targets) if targets else [self.default_mailbox()])
        self.attempts.append((data, targets))
        succeeded = False
        for target in targets:
            if self.failing is True or target in self.failing:
                continue
            self.delivered.append((data, target))
            succeeded = True
        return succeeded



@implementer(IProcessPipe)
class FakePipe:
    """Pretend to run programs, returning canned results."""

    def __init__(self, output=b'', succeeded=True):
        self.output = output
        self.succeeded = succeeded
        self.calls = []

    def run(self, program, args, data):
        self.calls.append((program, list(args), data))
        return (self.output if self.succeeded else b''), self.succeeded
