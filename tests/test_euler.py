# zetastar/tests/test_euler.py
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

import functools

import numpy as np
import pytest
from pytest import mark
import mpmath

import zetastar
from zetastar import _precision
from zetastar._special import _euler
from zetastar._special import _recurrence

from . import util

@functools.partial(np.vectorize, otypes=[np.longdouble])
def xeuler_ref(n):
    with mpmath.workdps(60):
        return np.longdouble(mpmath.nstr(mpmath.eulernum(int(n)), 40))

def test_known_values():
    e = zetastar.euler_number([0, 1, 2, 4, 6, 8, 10])
    np.testing.assert_array_equal(e, [1, 0, -1, 5, -61, 1385, -50521])

def test_odd_are_zero():
    n = np.arange(1, 3000, 2)
    assert np.all(zetastar.xeuler_number(n) == 0)

def test_dense_table():
    n = np.arange(0, zetastar.max_euler_even_index() + 1, 2)
    e1 = zetastar.xeuler_number(n)
    e2 = xeuler_ref(n)
    util.assert_relclose(e1, e2, 2 * util.XEPS)

@util.requires_extended
def test_recurrence_range():
    start = zetastar.max_euler_even_index() + 2
    n = np.arange(start, zetastar.xmax_euler_even_index() + 1, 2)
    e1 = zetastar.xeuler_number(n)
    e2 = xeuler_ref(n)
    util.assert_relclose(e1, e2, 32 * util.XEPS)

@util.requires_extended
def test_sign_alternates():
    n = np.arange(0, zetastar.xmax_euler_even_index() + 1, 2)
    e = zetastar.xeuler_number(n)
    np.testing.assert_array_equal(np.sign(e), np.where(n % 4, -1, 1))

def test_max_indices():
    assert zetastar.max_euler_even_index() == 186
    if _precision.is_truly_extended():
        assert zetastar.xmax_euler_even_index() == 1866
    e = zetastar.euler_number(zetastar.max_euler_even_index())
    assert abs(e) < util.DMAX

def test_overflow_standard():
    n = zetastar.max_euler_even_index()
    e = zetastar.euler_number([n + 2, n + 4, n + 6])
    np.testing.assert_array_equal(e, [util.DMAX, -util.DMAX, util.DMAX])

@util.requires_extended
def test_overflow_extended():
    n = zetastar.xmax_euler_even_index()
    assert abs(zetastar.xeuler_number(n)) < util.XMAX
    e = zetastar.xeuler_number([n + 2, n + 4, 10 ** 6, 10 ** 6 + 2])
    np.testing.assert_array_equal(e, [util.XMAX, -util.XMAX, util.XMAX, -util.XMAX])

def test_negative_index():
    with pytest.raises(ValueError):
        zetastar.euler_number(-4)

def test_sequences():
    e1 = zetastar.euler_number_sequence(180, 10)
    e2 = zetastar.euler_number(np.arange(180, 190))
    np.testing.assert_array_equal(e1, e2)
    e1 = zetastar.xeuler_even_index_sequence(0, 6)
    np.testing.assert_array_equal(e1, [1, -1, 5, -61, 1385, -50521])
    assert zetastar.xeuler_number_sequence(7, 0).shape == (0,)

@util.requires_extended
@mark.parametrize('n', [188, 190, 198, 208, 1000, 1858, 1866])
def test_recurrence_ratio(n):
    """ consecutive even numbers are related by the recurrence step, up to
    the ratio β(n + 1) / β(n - 1) ~ 1 """
    e0, e1 = zetastar.xeuler_number([n - 2, n])
    ratio = -e1 / e0 * _precision.PI_2 ** 2 / (n * (n - 1))
    assert abs(ratio - 1) < 3.0 ** -(n - 1) + 64 * util.XEPS

@util.requires_extended
def test_anchors_agree():
    """ iterating up from a sparse entry and down from the next one meet on
    the same value """
    seq = _euler.EULER
    j = np.arange(len(seq.sparse) - 1)
    k = seq.start + seq.spacing * j
    mid = k + seq.spacing // 2
    up, kup = seq.sparse[j], k
    down, kdown = seq.sparse[j + 1], k + seq.spacing
    for _ in range(seq.spacing // 4):
        up, kup = _recurrence.iterate(seq, up, kup, mid)
        down, kdown = _recurrence.iterate(seq, down, kdown, mid)
    np.testing.assert_array_equal(kup, mid)
    np.testing.assert_array_equal(kdown, mid)
    util.assert_relclose(up, down, 32 * util.XEPS)
