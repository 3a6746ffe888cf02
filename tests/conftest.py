# zetastar/tests/conftest.py
#
# Copyright (c) 2023, 2026, Giacomo Petrillo
#
# This file is part of zetastar.
#
# zetastar is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# zetastar is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with zetastar.  If not, see <http://www.gnu.org/licenses/>.

import pytest
import numpy as np

@pytest.fixture
def rng(request):
    """ A random generator with a deterministic per-test seed """
    nodeid = request.node.nodeid
    seed = np.array([nodeid], np.bytes_).view(np.uint8)
    return np.random.default_rng(seed)

@pytest.fixture(autouse=True)
def reset_random_seeds(rng):
    """ Set the seed of numpy's global random generator for tests that still
    use it. Prefer `rng` for new tests. """
    bitgen = rng.bit_generator.jumped(1)
    np.random.seed(np.array([bitgen.random_raw()], np.uint64).view(np.uint32))
