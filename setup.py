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

import re
import sys

from setuptools import setup, find_packages


# Calculate the version number without importing the mailfilter package.
with open('src/mailfilter/version.py') as fp:
    for line in fp:
        mo = re.match("VERSION = '(?P<version>[^']+?)'", line)
        if mo:
            __version__ = mo.group('version')
            break
    else:
        print('No version number found')
        sys.exit(1)



setup(
    name            = 'mailfilter',
    version         = __version__,
    description     = 'mailfilter -- write mail delivery filters in Python',
    long_description= """\
mailfilter is a library for writing mail delivery filters, the programs an
MTA hands each incoming message to.  A filter script inspects the message and
accepts it into a mailbox, rejects it, pipes it to another program or ignores
it.  Whatever goes wrong, the message is never silently lost.""",
    author          = 'The mailfilter Developers',
    license         = 'GPLv3',
    keywords        = 'email',
    packages        = find_packages('src'),
    package_dir     = {'': 'src'},
    include_package_data = True,
    package_data    = {
        'mailfilter.config': ['*.cfg'],
        },
    python_requires = '>=3.6',
    install_requires = [
        'lazr.config',
        'zope.event',
        'zope.interface',
        ],
    extras_require  = {
        'test': ['pytest'],
        },
    )
