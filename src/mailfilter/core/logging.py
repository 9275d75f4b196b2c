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

"""Logging initialization, using Python's standard logging package."""

__all__ = [
    'initialize',
    ]


import os
import sys
import logging

from lazr.config import as_boolean, as_log_level

from mailfilter.config import config
from mailfilter.utilities.filesystem import makedirs


_handlers = {}



def initialize(propagate=None):
    """Initialize all logs.

    :param propagate: Flag specifying whether logs should propagate their
        messages to the root logger.  If omitted, propagation is determined
        from the configuration files.
    :type propagate: bool or None
    """
    # The root logger logs to stderr.  An MTA normally hands a filter's
    # stderr back to the sender in a bounce, so keep it quiet by default.
    root_config = config.logging.root
    logging.basicConfig(format=root_config.format,
                        datefmt=root_config.datefmt,
                        level=as_log_level(root_config.level),
                        stream=sys.stderr)
    for logger_config in config.logger_configs:
        sub_name = logger_config.name.split('.')[-1]
        if sub_name == 'root':
            continue
        log = logging.getLogger('mailfilter.' + sub_name)
        log.propagate = (as_boolean(logger_config.propagate)
                         if propagate is None else propagate)
        log.setLevel(as_log_level(logger_config.level))
        # Re-initializing must not stack up handlers on the same logger.
        old_handler = _handlers.pop(sub_name, None)
        if old_handler is not None:
            log.removeHandler(old_handler)
            old_handler.close()
        # Only loggers with a configured path get their own file.
        path_str = logger_config.path.strip()
        if not path_str:
            continue
        formatter = logging.Formatter(fmt=logger_config.format,
                                      datefmt=logger_config.datefmt)
        path_abs = os.path.normpath(
            os.path.join(config.LOG_DIR, os.path.expanduser(path_str)))
        makedirs(os.path.dirname(path_abs))
        handler = logging.FileHandler(path_abs, encoding='utf-8')
        handler.name = sub_name
        _handlers[sub_name] = handler
        handler.setFormatter(formatter)
        log.addHandler(handler)



def get_handler(sub_name):
    """Return the handler associated with a named logger.

    :param sub_name: The logger name, sans the 'mailfilter.' prefix.
    :type sub_name: string
    :return: The file handler associated with the named logger.
    :rtype: `logging.FileHandler`
    """
    return _handlers[sub_name]
