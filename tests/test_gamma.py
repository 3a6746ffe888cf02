# zetastar/tests/test_gamma.py
#
# Copyright (c) 2022, 2026, Giacomo Petrillo
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

import math

import numpy as np
import pytest
import mpmath
from scipy import special

import zetastar
from zetastar import _precision

from . import util

def _gamma(x):
    with mpmath.workdps(40):
        return mpmath.gamma(util.tompf(x))

xgamma_ref = util.mpvectorize(_gamma)

def _lgamma(x):
    with mpmath.workdps(40):
        return mpmath.log(abs(mpmath.gamma(util.tompf(x))))

xlgamma_ref = util.mpvectorize(_lgamma)

def test_gamma_positive():
    x = np.linspace(0.01, 170, 1000).astype(np.longdouble)
    util.assert_relclose(zetastar.xgamma(x), xgamma_ref(x), 2000 * util.XEPS)

def test_gamma_negative():
    x = np.linspace(-30.5, -0.5, 61).astype(np.longdouble) + np.longdouble(0.25)
    util.assert_relclose(zetastar.xgamma(x), xgamma_ref(x), 2000 * util.XEPS)

def test_gamma_scipy():
    x = np.linspace(-100, 100, 1000)[1:]
    np.testing.assert_array_max_ulp(zetastar.gamma(x), special.gamma(x), 1600)

def test_gamma_integers():
    n = np.arange(1, 20)
    g = zetastar.gamma(n.astype(float))
    expected = np.array([math.factorial(k - 1) for k in n], float)
    np.testing.assert_array_max_ulp(g, expected, 4)

def test_gamma_poles():
    x = np.array([0., -1., -2., -100.])
    assert np.all(zetastar.gamma(x) == util.DMAX)
    assert np.all(zetastar.xgamma(x) == util.XMAX)

def test_gamma_overflow():
    assert zetastar.gamma(200.) == util.DMAX
    assert zetastar.xgamma(1e6) == util.XMAX

def test_lgamma():
    x = np.concatenate([np.linspace(0.1, 3000, 300), np.linspace(-40.3, -0.3, 41)])
    x = x.astype(np.longdouble)
    util.assert_relclose(zetastar.xlgamma(x), xlgamma_ref(x), 1e-16, 1)

def test_factorial():
    n = np.arange(19)
    np.testing.assert_array_equal(zetastar.factorial(n), [math.factorial(k) for k in n])

@util.requires_extended
def test_factorial_range():
    assert zetastar.xfactorial(1754) < util.XMAX
    assert zetastar.xfactorial(1755) == util.XMAX
    assert zetastar.factorial(171) == util.DMAX
    f = zetastar.xfactorial(np.arange(1500, 1755))
    with mpmath.workdps(40):
        ref = [mpmath.nstr(mpmath.factorial(k), 40) for k in range(1500, 1755)]
    util.assert_relclose(f, _precision.xarray(ref), 2e-16)

def test_lnfactorial():
    n = np.array([0, 1, 2, 10, 100, 1000, 1754, 1755, 10 ** 5, 10 ** 9])
    with mpmath.workdps(40):
        ref = [mpmath.nstr(mpmath.loggamma(int(k) + 1), 40) for k in n]
    ref = _precision.xarray(ref)
    util.assert_relclose(zetastar.xlnfactorial(n), ref, 1e-16, 1)

def test_factorial_negative():
    with pytest.raises(ValueError):
        zetastar.factorial(-1)
    with pytest.raises(ValueError):
        zetastar.xlnfactorial([3, -1])
