# zetastar/_special/_reflection.py
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
Analytic continuation to s < 0 of the star functions f*(s) = f(s) - 1 via
the functional equation f(s) = R(s) f(1 - s), which in terms of f* reads

    f*(s) = R(s) f*(1 - s) + R(s) - 1.
"""

import numpy

from .. import _precision
from . import _exp
from . import _gamma
from . import _trig

ZERO_THRESHOLD = 1.8 * _precision.XEPS
"""Cosine factors below this in absolute value are rounding noise of a zero."""

def gamma_power(t, base):
    """ Γ(t) / base^t for t > 1, going through logarithms where it overflows """
    direct = _gamma.tgamma(t) / base ** t
    logmag = _gamma.lgamma_positive(t) - t * numpy.log(base)
    return numpy.where(numpy.isfinite(direct), direct, numpy.exp(logmag))

def eta_factor(s):
    """
    R(s) = 2 (1 - 2^(1-s)) / (2^(1-s) - 2) sin(π s/2) Γ(1-s) / π^(1-s) for
    s < 0, the factor relating η(s) to η(1-s).
    """
    m, r = _trig.split(s)
    sin = _trig.sin_pi2(m, r)

    # 2 (1 - 2^(1-s)) / (2^(1-s) - 2) = 2 (2^(s-1) - 1) / (1 - 2^s), and
    # 1 - 2^s vanishes together with sin at s = 0
    ratio = 2 * (2.0 ** (s - 1) - 1) * sin / -_exp.exp2m1(s)
    ratio = numpy.where((numpy.abs(sin) < ZERO_THRESHOLD) & (m != 0), 0, ratio)

    # the gamma factor may overflow where ratio is an exact zero
    mag = gamma_power(1 - s, _precision.PI)
    return numpy.where(ratio == 0, 0, ratio * mag)

def beta_factor(s):
    """
    R(s) = cos(π s/2) Γ(1-s) / (π/2)^(1-s) for s < 0, the factor relating
    β(s) to β(1-s).
    """
    m, r = _trig.split(s)
    cos = _trig.cos_pi2(m, r)
    cos = numpy.where(numpy.abs(cos) < ZERO_THRESHOLD, 0, cos)
    mag = gamma_power(1 - s, _precision.PI_2)
    return numpy.where(cos == 0, 0, cos * mag)

def continuation(star_positive, factor, s, star=True):
    """
    Compute f*(s) for any real s given f* for s >= 0 and the reflection
    factor R for s < 0. If `star` is False compute f(s) instead, as
    R(s) f(1 - s) for s < 0.
    """
    neg = s < 0
    f = star_positive(numpy.where(neg, 1 - s, s))
    r = factor(numpy.where(neg, s, -1))
    if star:
        reflected = r * f + (r - 1)
    else:
        reflected = r * (1 + f)
        f = 1 + f
    reflected = numpy.where(numpy.isinf(r), r, reflected)
    return numpy.where(neg, reflected, f)
