# zetastar/tests/util.py
#
# Copyright (c) 2022, 2023, 2026, Giacomo Petrillo
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

import functools

from jax import tree_util
import numpy as np
from jax import numpy as jnp
import pytest
import mpmath

from zetastar import _precision

XEPS = np.finfo(np.longdouble).eps
XMAX = np.finfo(np.longdouble).max
DMAX = np.finfo(np.float64).max

requires_extended = pytest.mark.skipif(not _precision.is_truly_extended(),
    reason='numpy.longdouble is not wider than float64 on this platform')

def jaxtonumpy(x):
    """
    Recursively convert jax arrays in x to numpy arrays.
    """
    children, meta = tree_util.tree_flatten(x)
    children = (np.array(x) if isinstance(x, jnp.ndarray) else x for x in children)
    return tree_util.tree_unflatten(meta, children)

def assert_allclose(actual, desired, *, rtol=0, atol=0, equal_nan=False, **kw):
    """ change the default arguments of np.testing.assert_allclose """
    np.testing.assert_allclose(actual, desired, rtol=rtol, atol=atol, equal_nan=equal_nan, **kw)

def assert_relclose(actual, desired, rtol, floor=0):
    """ check |actual - desired| <= rtol max(|desired|, floor) elementwise """
    actual = np.asarray(actual)
    desired = np.asarray(desired)
    assert actual.dtype == desired.dtype, (actual.dtype, desired.dtype)
    scale = np.maximum(np.abs(desired), floor)
    diff = np.abs(actual - desired)
    bad = ~(diff <= rtol * scale)
    assert not np.any(bad), (
        f'{np.count_nonzero(bad)} mismatches, max relative error '
        f'{np.max(diff / scale)} > {rtol}, first at '
        f'{np.flatnonzero(bad)[0]}: {actual.flat[np.flatnonzero(bad)[0]]} '
        f'!= {desired.flat[np.flatnonzero(bad)[0]]}')

def tompf(x):
    """ convert a numpy float to mpmath without rounding it """
    return mpmath.mpf(np.format_float_scientific(x, precision=40, unique=False))

def mpvectorize(func, dtype=np.longdouble):
    """
    Vectorize an mpmath function of numpy floats, converting the result to
    `dtype`. `func` must convert its arguments with `tompf` inside its own
    working precision context.
    """
    @functools.partial(np.vectorize, otypes=[dtype])
    @functools.wraps(func)
    def wrapper(*args):
        result = func(*args)
        if dtype == np.longdouble:
            return np.longdouble(mpmath.nstr(result, 40))
        return dtype(result)
    return wrapper

def stardps(s, base=2):
    """ working digits to compute f(s) - 1 where f(s) = 1 + O(base^-s) """
    return 40 + int(max(float(s), 0) * np.log10(base))

def around(t, delta='1e-6'):
    """ the extended-precision points t - delta, t, t + delta """
    t = np.longdouble(t)
    d = np.longdouble(delta)
    return np.array([t - d, t, t + d])
