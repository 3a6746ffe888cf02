# zetastar/_special/_lambda.py
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
from . import _exp
from . import _series
from . import _zeta

ODD = _series.DirichletSeries(stride=2, alternating=False, weights=None)

DIRECT = 2
"""From here on λ* is summed over the odd bases, completed by an
Euler-Maclaurin tail. Going through ζ* would cancel."""

def dlambda_star(s):
    """ λ(s) - 1, from λ(s) = (1 - 2^-s) ζ(s) """
    z = _zeta.zeta_star(s)

    # s > 0: λ* = ((2^s - 1) ζ* - 1) / 2^s
    pos = (_exp.exp2m1(s) * z - 1) / 2.0 ** s
    summed = _series.direct(ODD, s) + _series.tail(ODD, s)
    pos = numpy.where(s >= DIRECT, summed, pos)

    # s < 0: λ* = (1 - 2^-s) ζ* - 2^-s
    u = 2.0 ** -s
    neg = (1 - u) * z - u
    neg = numpy.where(numpy.isinf(z), -z, neg)

    out = numpy.where(s > 0, pos, neg)
    out = numpy.where(s == 0, -1, out)
    return numpy.where(s == 1, numpy.inf, out)

def dlambda(s):
    # s < 1: λ = (1 - 2^-s) ζ, which has the same zeros as ζ plus s = 0
    small = s < 1
    z = _zeta.zeta(numpy.where(small, s, 0))
    prod = numpy.where(z == 0, 0, -_exp.exp2m1(-s) * z)
    out = numpy.where(small, prod, 1 + dlambda_star(s))
    return numpy.where(s == 1, numpy.inf, out)

@_precision.extended
def xdirichlet_lambda(s):
    """
    Compute the Dirichlet lambda function

        λ(s) = sum_{k=0}^∞ (2k + 1)^-s = (1 - 2^-s) ζ(s),

    continued to all real s. At the pole s = 1 the largest finite value is
    returned.
    """
    return dlambda(s)

@_precision.extended
def xdirichlet_lambda_star(s):
    """
    Compute λ*(s) = λ(s) - 1, accurate also where λ(s) is close to 1.
    """
    return dlambda_star(s)

dirichlet_lambda = _precision.demote(xdirichlet_lambda)
dirichlet_lambda_star = _precision.demote(xdirichlet_lambda_star)
