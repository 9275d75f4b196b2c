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

"""Initialize all global state.

Filter scripts normally never call this; the first `FilterSession` does it
for them.  Call `initialize()` explicitly to pick a configuration file other
than the one that would be found by searching.
"""

__all__ = [
    'INHIBIT_CONFIG_FILE',
    'ensure_initialized',
    'initialize',
    ]


import os

import mailfilter.core.logging

from mailfilter.config import config
from mailfilter.utilities.modules import call_name


INHIBIT_CONFIG_FILE = object()



def search_for_configuration_file():
    """Search the file system for a configuration file to use.

    This is only called if no configuration file was given explicitly.
    """
    config_path = os.getenv('MAILFILTER_CONFIG_FILE')
    # Both None and the empty string are considered "missing".
    if config_path and os.path.exists(config_path):
        return os.path.abspath(config_path)
    # ./mailfilter.cfg
    config_path = os.path.abspath('mailfilter.cfg')
    if os.path.exists(config_path):
        return config_path
    # ~/.mailfilter.cfg
    config_path = os.path.expanduser(os.path.join('~', '.mailfilter.cfg'))
    if os.path.exists(config_path):
        return os.path.abspath(config_path)
    # /etc/mailfilter.cfg
    config_path = '/etc/mailfilter.cfg'
    if os.path.exists(config_path):
        return config_path
    return None



def initialize(config_path=None, propagate_logs=None):
    """Load the configuration and set up logging.

    :param config_path: The path to the configuration file.  When None, one
        is searched for.  `INHIBIT_CONFIG_FILE` loads only the defaults.
    :type config_path: string
    :param propagate_logs: Should the log output propagate to stderr?
    :type propagate_logs: boolean or None
    """
    if config_path is None:
        config_path = search_for_configuration_file()
    elif config_path is INHIBIT_CONFIG_FILE:
        # For the test suite, force this back to not using a config file.
        config_path = None
    config.load(config_path)
    # Run the pre-hook if there is one.
    if config.mailfilter.pre_hook:
        call_name(config.mailfilter.pre_hook, '[mailfilter] pre_hook')
    mailfilter.core.logging.initialize(propagate_logs)
    # Run the post-hook if there is one.
    if config.mailfilter.post_hook:
        call_name(config.mailfilter.post_hook, '[mailfilter] post_hook')


def ensure_initialized():
    """Initialize with the defaults, unless that has been done already."""
    if not config.initialized:
        initialize()
