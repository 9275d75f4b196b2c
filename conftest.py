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

"""Set up the mailfilter test layer for pytest runs.

The test cases name their layer in a `layer` attribute, the way
zope.testrunner expects.  pytest knows nothing of layers, so the one layer
the suite uses is set up once for the whole session here.
"""

import pytest

from mailfilter.testing.layers import ConfigLayer


@pytest.fixture(autouse=True, scope='session')
def config_layer():
    ConfigLayer.setUp()
    yield
    ConfigLayer.tearDown()
