# zetastar/_special/_zeta.py
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
from . import _eta
from . import _exp

def zeta(s):
    """ ζ(s) = η(s) / (1 - 2^(1-s)) """
    eta = _eta.eta(s)
    z = eta / -_exp.exp2m1(1 - s)

    # for s < 0 the denominator is negative and overflows before η does
    z = numpy.where(numpy.isinf(eta), -eta, z)

    return numpy.where(s == 1, numpy.inf, z)

def zeta_star(s):
    """ ζ(s) - 1 """
    eta = _eta.eta_star(s)

    # s >= 0: ζ* = (2^(s-1) η* + 1) / (2^(s-1) - 1)
    u = s - 1
    pos = (2.0 ** u * eta + 1) / _exp.exp2m1(u)
    pos = numpy.where(s > _precision.XMAXEXP, 2.0 ** -s, pos)

    # s < 0: ζ* = (η* + 2^(1-s)) / (1 - 2^(1-s))
    t = 2.0 ** -u
    neg = (eta + t) / (1 - t)
    neg = numpy.where(numpy.isinf(eta), -eta, neg)

    out = numpy.where(s < 0, neg, pos)
    return numpy.where(s == 1, numpy.inf, out)

@_precision.extended
def xriemann_zeta(s):
    """
    Compute the Riemann zeta function

        ζ(s) = sum_{k=1}^∞ k^-s,

    continued to all real s. At the pole s = 1 the largest finite value is
    returned.

    Parameters
    ----------
    s : array_like
        The argument.

    Returns
    -------
    zeta : longdouble array
        ζ(s). Overflows give the largest finite value with the right sign.
    """
    return zeta(s)

@_precision.extended
def xriemann_zeta_star(s):
    """
    Compute ζ*(s) = ζ(s) - 1, accurate also where ζ(s) is close to 1. See
    `xriemann_zeta`.
    """
    return zeta_star(s)

riemann_zeta = _precision.demote(xriemann_zeta)
riemann_zeta_star = _precision.demote(xriemann_zeta_star)
