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

"""Interfaces for the hook registry."""

__all__ = [
    'HookName',
    'IHookRegistry',
    ]


from enum import Enum
from zope.interface import Attribute, Interface



class HookName(Enum):
    # A session was created.
    new = 'new'
    # The message is about to be written to mailboxes.
    before_accept = 'before_accept'
    # The message was written to mailboxes.
    after_accept = 'after_accept'
    # The message is being thrown away.
    ignore = 'ignore'
    # The message is being bounced.
    reject = 'reject'
    # The message is about to be fed to an external program.
    pipe = 'pipe'



class IHookRegistry(Interface):
    """Ordered callables attached to named points in a session's life."""

    parent = Attribute(
        """The registry whose callables run before this one's, or None.""")

    def register(hook, function):
        """Attach a callable to a hook.

        :param hook: The hook to attach to.
        :type hook: `HookName` or its string value.
        :param function: A callable taking the session as its only argument.
        :raises ValueError: if the hook name is unknown.
        """

    def unregister(hook, function):
        """Detach a callable from a hook.

        :raises ValueError: if the callable is not registered here.
        """

    def callables(hook):
        """Return every callable to run for the hook, in order.

        The parent's callables come first.
        """

    def invoke(hook, session):
        """Call every callable for the hook with the session.

        Return values are ignored and exceptions propagate.
        """
