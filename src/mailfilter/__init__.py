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

"""The `mailfilter` package.

Write mail delivery filters: an MTA hands the filter a raw message on
standard input and the filter decides to accept, reject, pipe or ignore it.
The usual entry point is the `FilterSession`:

    from mailfilter import FilterSession

    with FilterSession(emergency='~/emergency_mbox') as mail:
        if 'perl' in (mail.from_ or ''):
            mail.accept('~/Mail/perl')
        mail.accept()
"""

__all__ = [
    'FilterSession',
    'RejectMessage',
    'run_filter',
    ]


from mailfilter.app.runner import run_filter
from mailfilter.app.session import FilterSession
from mailfilter.core.errors import RejectMessage
