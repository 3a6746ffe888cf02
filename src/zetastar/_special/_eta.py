# zetastar/_special/_eta.py
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

ETA = _series.DirichletSeries(stride=1, alternating=True,
    weights=_series.WEIGHTS)

ONE = 64
"""From here on η(s) rounds to 1 in extended precision."""

_positive = functools.partial(_series.star_positive, ETA)

def eta_star(s):
    """ η(s) - 1 """
    return _reflection.continuation(_positive, _reflection.eta_factor, s)

def eta(s):
    f = _reflection.continuation(_positive, _reflection.eta_factor, s, star=False)
    return numpy.where(s >= ONE, 1, f)

@_precision.extended
def xdirichlet_eta(s):
    """
    Compute the Dirichlet eta function

        η(s) = sum_{k=1}^∞ (-1)^(k+1) k^-s,

    continued to all real s. η(s) = (1 - 2^(1-s)) ζ(s), and η(1) = log 2.

    Parameters
    ----------
    s : array_like
        The argument.

    Returns
    -------
    eta : longdouble array
        η(s). Overflows give the largest finite value with the right sign.
    """
    return eta(s)

@_precision.extended
def xdirichlet_eta_star(s):
    """
    Compute η*(s) = η(s) - 1 without the cancellation η(s) - 1 would have
    for large s. See `xdirichlet_eta`.
    """
    return eta_star(s)

dirichlet_eta = _precision.demote(xdirichlet_eta)
dirichlet_eta_star = _precision.demote(xdirichlet_eta_star)
