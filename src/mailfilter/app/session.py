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

"""Filter sessions.

A `FilterSession` holds one incoming message and decides its fate.  A
filter script inspects the message and then calls exactly one terminal
action:

* `accept()` files the message in one or more mailboxes;
* `reject()` bounces it back to the sender;
* `pipe()` feeds it to an external program;
* `ignore()` throws it away.

By default a terminal action ends the process with an `ExitStatus` the MTA
understands.  With `noexit` set, control returns to the script instead.

When something goes wrong, i.e. delivery fails, a piped program fails, or
the session is closed before any decision was made, a recovery cascade runs.
It first tries the emergency mailbox, if there is one, exactly once.  If
that is not possible it gives up: the process exits with the temporary
failure status, so the MTA will retry later, or a warning is issued when the
process is not allowed to exit.  A message is never silently lost.

Sessions are context managers.  Use them in a 'with' statement so the
recovery cascade runs however the filter script leaves the block:

    with FilterSession(emergency='~/emergency_mbox') as mail:
        if 'enlarge' in (mail.subject or ''):
            mail.reject('We do not accept spam')
        mail.accept('~/Mail/inbox')

Hooks run inline and may call back into the session.  Nothing guards
against such reentrancy.
"""

__all__ = [
    'FilterSession',
    ]


import sys
import logging
import warnings

from zope.interface import implementer

from mailfilter.app.hooks import HookRegistry
from mailfilter.config import config
from mailfilter.core.errors import (
    AbandonedSession, DeliveryFailure, PipeFailure, RejectMessage,
    UnhandledMessageWarning)
from mailfilter.core.initialize import ensure_initialized
from mailfilter.email.message import Message, parse
from mailfilter.interfaces.hooks import HookName
from mailfilter.interfaces.mta import IMailboxDelivery, IProcessPipe
from mailfilter.interfaces.session import ExitStatus, IFilterSession
from mailfilter.utilities.modules import make_component


log = logging.getLogger('mailfilter.session')



@implementer(IFilterSession)
class FilterSession:
    """Decide the fate of one message."""

    # Hooks registered here apply to every session.  A subclass may define
    # its own registry with this one as the parent.
    hooks = HookRegistry()

    def __init__(self, data=None, emergency=None, noexit=None, stdin=None,
                 delivery=None, pipe=None, hooks=None):
        """Create a session, reading the message.

        :param data: The raw message.  If None, the message is read from
            `stdin`.
        :type data: bytes or string
        :param emergency: The mailbox to deliver to if the message could not
            be handled properly.  Defaults to the configured one.
        :type emergency: string
        :param noexit: When true, terminal actions return to the caller
            instead of ending the process.  Defaults to the configured value.
        :type noexit: bool
        :param stdin: The file to read the message from when `data` is not
            given.  Defaults to the process's standard input.
        :param delivery: The `IMailboxDelivery` to use.  Defaults to an
            instance of the configured class.
        :param pipe: The `IProcessPipe` to use.  Defaults to an instance of
            the configured class.
        :param hooks: The parent of this session's hook registry.  Defaults
            to the class's registry.
        :type hooks: `IHookRegistry`
        """
        ensure_initialized()
        if data is None:
            if stdin is None:
                stdin = sys.stdin.buffer
            data = stdin.read()
        self._message = parse(data)
        self.emergency = (config.emergency if emergency is None
                          else emergency)
        self.noexit = (config.noexit if noexit is None else noexit)
        if delivery is None:
            delivery = make_component(
                config.delivery['class'], IMailboxDelivery, '[delivery] class')
        if pipe is None:
            pipe = make_component(
                config.pipe['class'], IProcessPipe, '[pipe] class')
        self.delivery = delivery
        self.process_pipe = pipe
        self.delivered = False
        self.gave_up = False
        self._emergency_tried = False
        self._closed = False
        self.hooks = HookRegistry(
            parent=(type(self).hooks if hooks is None else hooks))
        self._call_hook(HookName.new)

    def __repr__(self):
        return '<{0} {1} delivered={2} gave_up={3}>'.format(
            type(self).__name__, self.message_id,
            self.delivered, self.gave_up)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if (exc_type is not None and issubclass(exc_type, Exception)
                and not (self.delivered or self.gave_up)):
            log.error('Filter failed while handling %s', self.message_id,
                      exc_info=(exc_type, exc_value, traceback))
        self.close()
        # Don't suppress the exception.
        return False

    # The message and its headers.

    @property
    def message(self):
        """The message being filtered.

        Assigning bytes or a string parses them into a new message.
        """
        return self._message

    @message.setter
    def message(self, message):
        if not isinstance(message, Message):
            message = parse(message)
        self._message = message

    @property
    def message_id(self):
        return self._message.get('message-id', 'n/a')

    def header(self, name):
        """The first value of the named header, or None."""
        return self._message.header(name)

    def all_headers(self, name):
        """All values of the named header, in message order."""
        return self._message.all_headers(name)

    @property
    def body(self):
        return self._message.body

    @property
    def from_(self):
        return self._message.from_

    @property
    def to(self):
        return self._message.to

    @property
    def cc(self):
        return self._message.cc

    @property
    def bcc(self):
        return self._message.bcc

    @property
    def subject(self):
        return self._message.subject

    @property
    def received(self):
        return self._message.received

    def set_exit(self, flag):
        """Set whether terminal actions end the process.

        This is the inverse of the `noexit` attribute.
        """
        self.noexit = not flag

    # Terminal actions.

    def accept(self, *targets):
        """See `IFilterSession`.

        Runs the `before_accept` hooks, then `after_accept` once the message
        has been delivered.
        """
        self._call_hook(HookName.before_accept)
        try:
            succeeded = self.delivery.deliver(
                self._message.serialize(), list(targets))
        except DeliveryFailure as error:
            log.error('%s', error)
            succeeded = False
        if not succeeded:
            log.error('ACCEPT failed: %s', self.message_id)
            self._fail_gracefully()
            return False
        log.info('ACCEPT: %s', self.message_id)
        self._call_hook(HookName.after_accept)
        self._done_ok()
        return True

    def reject(self, reason=None):
        """See `IFilterSession`.

        The exit policy has no effect here; `RejectMessage` is raised either
        way, for the environment to turn into a bounce.
        """
        self._call_hook(HookName.reject)
        # A rejection is a verdict, so recovery must never kick in.
        self.delivered = True
        log.info('REJECT: %s', self.message_id)
        raise RejectMessage(reason)

    def pipe(self, program, *args):
        """See `IFilterSession`.

        The program and each of its arguments are given separately; no shell
        is involved.  With `noexit` set, this allows the message to be
        replaced by a filtered version of itself:

            mail.set_exit(False)
            mail.message = mail.pipe('spamassassin')
            mail.set_exit(True)

        A failing program triggers the recovery cascade only when the process
        is to be terminated.  Otherwise None is returned and the session is
        left undecided.
        """
        if not program:
            raise ValueError('No program to pipe to')
        self._call_hook(HookName.pipe)
        try:
            output, succeeded = self.process_pipe.run(
                program, list(args), self._message.serialize())
        except PipeFailure as error:
            log.error('%s', error)
            output, succeeded = None, False
        if succeeded:
            log.info('PIPE: %s to %s', self.message_id, program)
            self._done_ok()
            return output
        log.error('PIPE failed: %s to %s', self.message_id, program)
        if not self.noexit:
            self._fail_gracefully()
        return None

    def ignore(self):
        """See `IFilterSession`."""
        self._call_hook(HookName.ignore)
        log.info('IGNORE: %s', self.message_id)
        self._done_ok()

    def close(self):
        """See `IFilterSession`."""
        if self._closed:
            return
        self._closed = True
        if self.delivered or self.gave_up:
            return
        log.error('%s', AbandonedSession(
            'Message {0} was left without a decision'.format(
                self.message_id)))
        self._fail_gracefully()

    # Outcomes.

    def _call_hook(self, hook):
        self.hooks.invoke(hook, self)

    def _done_ok(self):
        self.delivered = True
        if not self.noexit:
            sys.exit(ExitStatus.delivered)

    def _fail_gracefully(self):
        """The recovery cascade."""
        if self.delivered or self.gave_up:
            return
        # The emergency mailbox gets exactly one chance; if delivering there
        # fails too, we end up back here.
        if self.emergency and not self._emergency_tried:
            self._emergency_tried = True
            log.warning('Trying emergency mailbox %s for %s',
                        self.emergency, self.message_id)
            self.accept(self.emergency)
        if not (self.delivered or self.gave_up):
            self._fail_badly()

    def _fail_badly(self):
        self.gave_up = True
        if not self.noexit:
            log.error('TEMPFAIL: %s', self.message_id)
            sys.exit(ExitStatus.tempfail)
        text = 'Message {0} was never handled properly'.format(
            self.message_id)
        log.error('%s', text)
        warnings.warn(text, UnhandledMessageWarning, stacklevel=3)
