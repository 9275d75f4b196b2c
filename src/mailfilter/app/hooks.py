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

"""Hooks into the life of a filter session.

Filter scripts and subclasses extend a session's behavior by attaching
callables to the named points in `HookName`.  For example, to log every
accepted message:

    def log_accept(session):
        log.info('accepted %s', session.message['message-id'])

    FilterSession.hooks.register(HookName.after_accept, log_accept)

Every invocation is also published as a `HookEvent` through zope.event, so
global subscribers can watch all sessions without registering anything.
"""

__all__ = [
    'HookEvent',
    'HookRegistry',
    ]


from zope.event import notify
from zope.interface import implementer

from mailfilter.interfaces.hooks import HookName, IHookRegistry



class HookEvent:
    """An event signaling that a session reached a hook point."""

    def __init__(self, hook, session):
        self.hook = hook
        self.session = session

    def __repr__(self):
        return '<HookEvent {0}>'.format(self.hook.value)



@implementer(IHookRegistry)
class HookRegistry:
    """Ordered lists of callables keyed by `HookName`."""

    def __init__(self, parent=None):
        self.parent = parent
        self._callables = dict((hook, []) for hook in HookName)

    def register(self, hook, function):
        """See `IHookRegistry`."""
        self._callables[HookName(hook)].append(function)

    def unregister(self, hook, function):
        """See `IHookRegistry`."""
        self._callables[HookName(hook)].remove(function)

    def callables(self, hook):
        """See `IHookRegistry`."""
        hook = HookName(hook)
        inherited = ([] if self.parent is None
                     else self.parent.callables(hook))
        return inherited + self._callables[hook]

    def invoke(self, hook, session):
        """See `IHookRegistry`."""
        hook = HookName(hook)
        # Take the list up front; a callable registering another callable
        # does not get it run in this round.
        for function in self.callables(hook):
            function(session)
        notify(HookEvent(hook, session))
