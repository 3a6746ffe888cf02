# zetastar/_special/_gamma.py
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

""" the gamma function and factorials in extended precision """

import numpy

from .. import _precision
from . import _bernoulli
from . import _trig

SHIFT = 20
"""Arguments are shifted up to at least this before the Stirling series."""

_k = numpy.arange(1, 13)
_stirling_coef = _bernoulli.bernoulli(2 * _k) / (2 * _k * (2 * _k - 1))

def stirling_series(y):
    """ log Γ(y) - (y - 1/2) log y + y - log √(2π), for y >= SHIFT """
    z = 1 / (y * y)
    return numpy.polyval(_stirling_coef[::-1], z) / y

def shift_up(x):
    """ return y = x + m >= SHIFT and x (x + 1) ... (x + m - 1), for x > 0 """
    m = numpy.maximum(0, numpy.ceil(SHIFT - x))
    prod = numpy.ones_like(x)
    for k in range(SHIFT):
        prod = numpy.where(k < m, prod * (x + k), prod)
    return x + m, prod

def lgamma_positive(x):
    """ log Γ(x) for x > 0 """
    y, prod = shift_up(x)
    lg = (y - 0.5) * numpy.log(y) - y + _precision.LNSQRT2PI
    return lg + stirling_series(y) - numpy.log(prod)

def gamma_positive(x):
    """ Γ(x) for x > 0, inf where it overflows """
    y, prod = shift_up(x)
    v = y ** (y / 2 - 0.25)
    g = v * (v * numpy.exp(-y))
    g = numpy.sqrt(2 * _precision.PI) * g * numpy.exp(stirling_series(y))
    overflow = lgamma_positive(x) > _precision.XLOGMAX
    return numpy.where(overflow, numpy.inf, g / prod)

def tgamma(x):
    """ Γ(x), reflected for x < 0, +inf on the poles """
    neg = x < 0
    g = gamma_positive(numpy.where(neg, 1 - x, x))
    sin = _trig.sin_pi(x)
    refl = numpy.where(sin == 0, numpy.inf, _precision.PI / (sin * g))
    return numpy.where(neg, refl, g)

def lgamma_abs(x):
    """ log |Γ(x)| """
    neg = x < 0
    lg = lgamma_positive(numpy.where(neg, 1 - x, x))
    refl = _precision.LNPI - numpy.log(numpy.abs(_trig.sin_pi(x))) - lg
    return numpy.where(neg, refl, lg)

with numpy.errstate(over='ignore'):
    _factorials = numpy.cumprod(numpy.concatenate([
        numpy.ones(1, _precision.EXTENDED),
        numpy.arange(1, 2000, dtype=_precision.EXTENDED),
    ]))
MAXFACTORIAL = int(numpy.count_nonzero(numpy.isfinite(_factorials))) - 1

def fact(n):
    """ n! for an integer array n >= 0, inf where it overflows """
    n = numpy.asarray(n)
    f = _factorials[numpy.clip(n, 0, MAXFACTORIAL)]
    return numpy.where(n > MAXFACTORIAL, numpy.inf, f)

def lnfact(n):
    n = numpy.asarray(n)
    small = n <= MAXFACTORIAL
    f = fact(numpy.where(small, n, 0))
    return numpy.where(small, numpy.log(f), lgamma_positive(n + _precision.EXTENDED(1)))

@_precision.extended
def xgamma(x):
    """
    Compute the gamma function Γ(x) in extended precision.

    The poles at the non-positive integers and overflows give the largest
    finite value.
    """
    return tgamma(x)

@_precision.extended
def xlgamma(x):
    """ Compute log |Γ(x)| in extended precision. """
    return lgamma_abs(x)

@_precision.indexed
def xfactorial(n):
    """
    Compute n! in extended precision. Overflows give the largest finite
    value.

    Raises
    ------
    ValueError :
        If n is negative.
    """
    if numpy.any(n < 0):
        raise ValueError(f'factorial of negative integer {numpy.min(n)}')
    return fact(n)

@_precision.indexed
def xlnfactorial(n):
    """ Compute log n! in extended precision. """
    if numpy.any(n < 0):
        raise ValueError(f'factorial of negative integer {numpy.min(n)}')
    return lnfact(n)

gamma = _precision.demote(xgamma)
lgamma = _precision.demote(xlgamma)
factorial = _precision.demote(xfactorial)
lnfactorial = _precision.demote(xlnfactorial)
