# zetastar/__init__.py
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

"""
Riemann zeta family and Bernoulli/Euler numbers in extended precision

Every function comes in two versions: one prefixed with 'x' computing in
numpy.longdouble, and one without the prefix returning float64, obtained
from the former by clamping the values that do not fit to the largest finite
float64. Poles and overflows are signaled by the largest finite value of the
output type, not by exceptions.

The float64 versions are also available as jax-compatible functions in the
submodule `jaxcompat`.
"""

__version__ = '0.1.0'

from ._precision import saturate
from ._special import * # safe, _special/__init__.py only imports functions

from . import jaxcompat
