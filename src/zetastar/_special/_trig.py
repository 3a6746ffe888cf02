# zetastar/_special/_trig.py
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

import numpy

from .. import _precision

def split(x):
    """ x = n + r with n integer and |r| <= 1/2, both exact """
    n = numpy.rint(x)
    return n, x - n

def cos_pi2(n, x):
    """ compute cos(π/2 (n + x)) for n integer, accurate for small x """
    arg = -_precision.PI_2 * x
    cos = numpy.where(n % 2, numpy.sin(arg), numpy.cos(arg))
    return cos * numpy.where(n // 2 % 2, -1, 1)

def sin_pi2(n, x):
    return cos_pi2(n - 1, x)

def sin_pi(x):
    """ sin(π x), exactly zero on integers """
    n, r = split(x)
    return sin_pi2(2 * n, 2 * r)
