# zetastar/tests/test_eta.py
#
# Copyright (c) 2026, Giacomo Petrillo
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

import numpy as np
import pytest
from pytest import mark
import mpmath

import zetastar
from zetastar import _precision

from . import util

def _eta(s):
    with mpmath.workdps(40):
        return mpmath.altzeta(util.tompf(s))

def _eta_star(s):
    with mpmath.workdps(util.stardps(s)):
        return mpmath.altzeta(util.tompf(s)) - 1

xeta_ref = util.mpvectorize(_eta)
eta_ref = util.mpvectorize(_eta, np.float64)
xeta_star_ref = util.mpvectorize(_eta_star)
eta_star_ref = util.mpvectorize(_eta_star, np.float64)

positive = [
    pytest.param(np.linspace(0, 1, 101), id='small'),
    pytest.param(np.linspace(1, 17.9, 100), id='accelerated'),
    pytest.param(np.linspace(18, 200, 100), id='direct'),
]

def test_known_values():
    e = zetastar.dirichlet_eta([1., 0., -1., 2.])
    expected = [np.log(2), 1/2, 1/4, np.pi ** 2 / 12]
    np.testing.assert_array_max_ulp(e, np.array(expected), 2)
    util.assert_relclose(zetastar.xdirichlet_eta(1.), _precision.LN2, 8 * util.XEPS)

def test_trivial_zeros():
    s = -np.arange(2, 100, 2.)
    assert np.all(zetastar.xdirichlet_eta(s) == 0)
    assert np.all(zetastar.xdirichlet_eta_star(s) == -1)

@mark.parametrize('s', positive)
def test_positive(s):
    x = s.astype(np.longdouble)
    util.assert_relclose(zetastar.xdirichlet_eta(x), xeta_ref(x), 200 * util.XEPS)
    np.testing.assert_array_max_ulp(zetastar.dirichlet_eta(s), eta_ref(s), 2)

@mark.parametrize('s', positive)
def test_star_positive(s):
    x = s.astype(np.longdouble)
    util.assert_relclose(zetastar.xdirichlet_eta_star(x), xeta_star_ref(x), 200 * util.XEPS)
    np.testing.assert_array_max_ulp(zetastar.dirichlet_eta_star(s), eta_star_ref(s), 2)

def test_negative():
    s = np.linspace(-60, -0.01, 300)
    x = s.astype(np.longdouble)
    util.assert_relclose(zetastar.xdirichlet_eta(x), xeta_ref(x), 1e-16)
    np.testing.assert_array_max_ulp(zetastar.dirichlet_eta(s), eta_ref(s), 4)
    util.assert_relclose(zetastar.xdirichlet_eta_star(x), xeta_star_ref(x), 1e-16, 1)

def test_continuous_at_zero():
    s = np.array([-1e-30, -1e-15, -1e-10, 0, 1e-10, 1e-15, 1e-30], np.longdouble)
    util.assert_relclose(zetastar.xdirichlet_eta(s), xeta_ref(s), 500 * util.XEPS)

def test_one_for_large_argument():
    assert zetastar.xdirichlet_eta(64.) == 1
    assert np.all(zetastar.dirichlet_eta([100., 1e10, np.inf]) == 1)
    assert zetastar.dirichlet_eta_star(100.) < 0

def test_star_from_series():
    """ for large s, η* is dominated by the first terms of the series """
    s = np.array([100., 300., 1000.], np.longdouble)
    e = zetastar.xdirichlet_eta_star(s)
    approx = -2 ** -s + 3 ** -s - 4 ** -s
    util.assert_relclose(e, approx, 4 * util.XEPS)

@mark.parametrize('s,xmax', [
    pytest.param(-400.5, util.DMAX, id='standard'),
    pytest.param(-5000.5, util.XMAX, id='extended'),
])
def test_overflow_sign(s, xmax):
    with mpmath.workdps(30):
        sign = int(mpmath.sign(mpmath.altzeta(s)))
    f = zetastar.dirichlet_eta if xmax == util.DMAX else zetastar.xdirichlet_eta
    assert f(s) == sign * xmax
    assert f(s - 2) == -sign * xmax

def test_int_matches_real():
    n = np.arange(-60, 100)
    util.assert_relclose(
        zetastar.dirichlet_eta_int(n),
        zetastar.dirichlet_eta(n.astype(float)),
        4e-16,
    )
    util.assert_relclose(
        zetastar.dirichlet_eta_star_int(n),
        zetastar.dirichlet_eta_star(n.astype(float)),
        4e-16,
    )

def test_int():
    n = np.arange(-150, 300)
    with mpmath.workdps(200):
        ref = [mpmath.nstr(mpmath.altzeta(int(k)), 40) for k in n]
        ref_star = [mpmath.nstr(mpmath.altzeta(int(k)) - 1, 40) for k in n]
    util.assert_relclose(zetastar.xdirichlet_eta_int(n), _precision.xarray(ref), 32 * util.XEPS)
    util.assert_relclose(zetastar.xdirichlet_eta_star_int(n), _precision.xarray(ref_star), 32 * util.XEPS)

def test_int_special_values():
    assert zetastar.xdirichlet_eta_int(0) == 0.5
    assert zetastar.xdirichlet_eta_int(1) == _precision.LN2
    assert zetastar.xdirichlet_eta_star_int(0) == -0.5
    util.assert_allclose(zetastar.dirichlet_eta_star_int(1), np.log(2) - 1, rtol=1e-15)

def test_int_overflow():
    assert zetastar.dirichlet_eta_int(-301) == util.DMAX
    assert zetastar.dirichlet_eta_int(-303) == -util.DMAX
    assert zetastar.dirichlet_eta_int(-302) == 0

@util.requires_extended
def test_int_overflow_extended():
    assert zetastar.xdirichlet_eta_int(-2301) == util.XMAX
    assert zetastar.xdirichlet_eta_int(-2401) == util.XMAX
    assert zetastar.xdirichlet_eta_int(-2403) == -util.XMAX

def test_continuous_at_cutover():
    x = util.around(18)
    e = zetastar.xdirichlet_eta_star(x)
    assert e[0] < e[1] < e[2]
    util.assert_relclose(e, xeta_star_ref(x), 50 * util.XEPS)

def test_continuous_where_one():
    x = util.around(64)
    e = zetastar.xdirichlet_eta(x)
    assert e[2] == 1
    util.assert_allclose(e, np.ones(3), atol=util.XEPS)
    util.assert_relclose(zetastar.xdirichlet_eta_star(x), xeta_star_ref(x), 50 * util.XEPS)
