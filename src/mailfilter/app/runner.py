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

"""Run a filter function as a complete mail filter program."""

__all__ = [
    'bounce',
    'run_filter',
    ]


import sys

from mailfilter.app.session import FilterSession
from mailfilter.core.errors import RejectMessage



def bounce(error, stderr=None):
    """Tell the MTA to bounce the message.

    The reason, if any, goes to standard error; most MTAs include it in the
    bounce sent back to the sender.

    :param error: The rejection.
    :type error: `RejectMessage`
    :param stderr: Where to write the reason.  Defaults to sys.stderr.
    """
    if stderr is None:
        stderr = sys.stderr
    if error.reason:
        print(error.reason, file=stderr)
    sys.exit(error.status)


def run_filter(function, **options):
    """Run a filter function over the incoming message.

    A session is created with the given options and handed to the function.
    The recovery cascade runs if the function returns or fails without
    deciding the message's fate, and a rejection ends the process with the
    bounce status.

        def spam_filter(mail):
            if mail.header('X-Spam-Flag') == 'YES':
                mail.reject('Looks like spam')
            mail.accept()

        run_filter(spam_filter, emergency='~/emergency_mbox')

    :param function: A callable taking the `FilterSession`.
    :param options: Keyword arguments for `FilterSession`.
    :return: The finished session, when the process was not terminated.
    """
    try:
        with FilterSession(**options) as session:
            function(session)
    except RejectMessage as error:
        bounce(error)
    return session
