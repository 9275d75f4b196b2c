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

"""Mailboxes that interoperate with the 'with' statement."""

__all__ = [
    'Maildir',
    'Mbox',
    ]


import mailbox



class Mbox(mailbox.mbox):
    """An mbox file that is locked for the duration of a 'with' block."""

    def __enter__(self):
        try:
            self.lock()
        except BaseException:
            # The file is already open; __exit__ will not run to close it.
            self.close()
            raise
        return self

    def __exit__(self, *exc):
        try:
            self.flush()
        finally:
            self.unlock()
            self.close()
        # Don't suppress the exception.
        return False


class Maildir(mailbox.Maildir):
    """A Maildir usable in a 'with' statement.

    Maildir delivery needs no lock, since every message lands in its own
    file and is moved into place atomically.
    """

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
