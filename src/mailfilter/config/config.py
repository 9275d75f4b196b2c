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

"""Configuration file loading and management."""

__all__ = [
    'Configuration',
    ]


import os

from lazr.config import ConfigSchema, as_boolean
from zope.interface import Interface, implementer


HERE = os.path.dirname(__file__)



class IConfiguration(Interface):
    """Marker interface for the global configuration object."""



@implementer(IConfiguration)
class Configuration:
    """The core global configuration object."""

    def __init__(self):
        self._config = None
        self.filename = None
        self.LOG_DIR = None

    def __getattr__(self, name):
        """Delegate to the configuration object."""
        return getattr(self._config, name)

    @property
    def initialized(self):
        """True once a configuration has been loaded."""
        return self._config is not None

    def load(self, filename=None):
        """Load the configuration from the schema and config files."""
        schema = ConfigSchema(os.path.join(HERE, 'schema.cfg'))
        # First, load the absolute minimum default configuration, then if a
        # configuration filename was given by the user, push it.
        self._config = schema.load(os.path.join(HERE, 'mailfilter.cfg'))
        if filename is not None:
            self.filename = filename
            with open(filename) as user_config:
                self._config.push(filename, user_config.read())
        self._post_process()

    def push(self, config_name, config_string):
        """Push a new configuration onto the stack."""
        self._config.push(config_name, config_string)
        self._post_process()

    def pop(self, config_name):
        """Pop a configuration from the stack."""
        self._config.pop(config_name)
        self._post_process()

    def _post_process(self):
        """Perform post-processing after loading the configuration files."""
        self.LOG_DIR = os.path.abspath(
            os.path.expanduser(self._config.paths.log_dir))

    @property
    def logger_configs(self):
        """Return all log config sections."""
        return self._config.getByCategory('logging', [])

    @property
    def emergency(self):
        """The configured emergency mailbox, or None."""
        mailbox = self._config.mailfilter.emergency.strip()
        return (mailbox if mailbox else None)

    @property
    def noexit(self):
        """The configured exit policy flag."""
        return as_boolean(self._config.mailfilter.noexit)

    @property
    def spool_directories(self):
        """The spool directories searched for a default mailbox."""
        return self._config.delivery.spool_directories.split()
