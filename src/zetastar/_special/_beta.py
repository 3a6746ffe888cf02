# zetastar/_special/_beta.py
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

import numpy

from .. import _precision
from . import _series
from . import _reflection

BETA = _series.DirichletSeries(stride=2, alternating=True,
    weights=_series.WEIGHTS)

ONE = 40
"""From here on β(s) rounds to 1 in extended precision."""

_positive = functools.partial(_series.star_positive, BETA)

def beta_star(s):
    """ β(s) - 1 """
    return _reflection.continuation(_positive, _reflection.beta_factor, s)

def beta(s):
    f = _reflection.continuation(_positive, _reflection.beta_factor, s, star=False)
    return numpy.where(s >= ONE, 1, f)

@_precision.extended
def xcatalan_beta(s):
    """
    Compute the Dirichlet beta function

        β(s) = sum_{k=0}^∞ (-1)^k (2k + 1)^-s,

    continued to all real s. β(2) is Catalan's constant.

    Parameters
    ----------
    s : array_like
        The argument.

    Returns
    -------
    beta : longdouble array
        β(s). Overflows give the largest finite value with the right sign.
    """
    return beta(s)

@_precision.extended
def xcatalan_beta_star(s):
    """
    Compute β*(s) = β(s) - 1 without the cancellation β(s) - 1 would have
    for large s. See `xcatalan_beta`.
    """
    return beta_star(s)

catalan_beta = _precision.demote(xcatalan_beta)
catalan_beta_star = _precision.demote(xcatalan_beta_star)
