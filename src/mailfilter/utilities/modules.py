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

"""Loading the components and hooks named in the configuration.

The configuration names Python objects by their dotted path, e.g. the
`[delivery] class` key.  Any failure to load one is reported as a
`ConfigurationError` naming the offending key, so a broken configuration
file is easy to track down from the log.
"""

__all__ = [
    'call_name',
    'find_name',
    'make_component',
    ]


import importlib

from mailfilter.core.errors import ConfigurationError



def find_name(dotted_name, key=None):
    """Import and return the named object in package space.

    :param dotted_name: The dotted module path name to the object.
    :type dotted_name: string
    :param key: The configuration key the name came from, for error reports.
    :type key: string
    :return: The object.
    :rtype: object
    :raises ConfigurationError: when the object cannot be found.
    """
    package_path, dot, object_name = dotted_name.strip().rpartition('.')
    if not package_path:
        raise ConfigurationError(key, dotted_name, 'not a dotted name')
    try:
        module = importlib.import_module(package_path)
    except ImportError as error:
        raise ConfigurationError(key, dotted_name, error) from error
    try:
        return getattr(module, object_name)
    except AttributeError as error:
        raise ConfigurationError(key, dotted_name, error) from error


def call_name(dotted_name, key=None):
    """Import and call the named object, without arguments.

    :param dotted_name: The dotted module path name to the object.
    :type dotted_name: string
    :param key: The configuration key the name came from, for error reports.
    :type key: string
    :return: Whatever the call returns.
    :raises ConfigurationError: when the object cannot be found or is not
        callable.
    """
    named_callable = find_name(dotted_name, key)
    if not callable(named_callable):
        raise ConfigurationError(key, dotted_name, 'not callable')
    return named_callable()


def make_component(dotted_name, interface, key=None):
    """Instantiate the named class and check that it provides an interface.

    :param dotted_name: The dotted module path name to the class.
    :type dotted_name: string
    :param interface: The interface the instance must provide.
    :param key: The configuration key the name came from, for error reports.
    :type key: string
    :return: The new instance.
    :raises ConfigurationError: when the class cannot be found, or its
        instances do not provide the interface.
    """
    component = call_name(dotted_name, key)
    if not interface.providedBy(component):
        raise ConfigurationError(
            key, dotted_name,
            'does not provide {0}'.format(interface.__name__))
    return component
