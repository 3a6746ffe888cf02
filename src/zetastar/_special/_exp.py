# zetastar/_special/_exp.py
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

import numpy

from .. import _precision

def exp2m1(x):
    r"""
    Compute accurately :math:`2^x - 1`.
    """
    # expm1(x log 2) has relative error ~ x eps for large x
    return numpy.where(numpy.abs(x) < 1, numpy.expm1(x * _precision.LN2), 2.0 ** x - 1)
