# zetastar/_special/_series.py
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
Dirichlet series f(s) = 1 + sum_{k>=1} c_k (1 + stride k)^-s, with c_k = (-1)^k
or c_k = 1. The functions here compute f*(s) = f(s) - 1 for s >= 0.
"""

import collections

import numpy

from .. import _precision
from . import _bernoulli
from . import _gamma

DirichletSeries = collections.namedtuple('DirichletSeries', [
    'stride',  # the bases are 1 + stride k, k = 1, 2, ...
    'alternating', # signs -, +, -, ... instead of all +
    'weights', # accelerator weights d_0, ..., d_n
])

CUTOVER = 18
"""Below this argument the accelerator is used, above it the plain sum."""

MAXTERMS = 30

def sum_backwards(terms):
    """ sum along the last axis starting from the last term """
    total = numpy.zeros(terms.shape[:-1], terms.dtype)
    for term in numpy.moveaxis(terms, -1, 0)[::-1]:
        total = total + term
    return total

def accelerated(series, s):
    """
    The series minus 1 by the Borwein-type weighted sum

        -1/d_0 sum_{k=1}^n (-1)^(k+1) d_k (1 + stride k)^-s,

    with the terms accumulated from the smallest one.
    """
    d = series.weights
    k = numpy.arange(1, len(d))
    sign = numpy.where(k % 2, 1, -1)
    base = (1 + series.stride * k).astype(_precision.EXTENDED)
    terms = sign * d[1:] * base ** -s[..., None]
    return -sum_backwards(terms) / d[0]

def direct(series, s):
    """
    The series minus 1 summed term by term, stopping at the first term that
    does not change the partial sum, and at most `MAXTERMS` terms. The
    retained terms are then added again from the last one.
    """
    k = numpy.arange(1, MAXTERMS + 1)
    if series.alternating:
        sign = numpy.where(k % 2, -1, 1)
    else:
        sign = numpy.ones_like(k)
    base = (1 + series.stride * k).astype(_precision.EXTENDED)
    terms = sign * base ** -s[..., None]

    partial = terms[..., 0]
    done = numpy.zeros(partial.shape, bool)
    kept = [partial]
    for term in numpy.moveaxis(terms, -1, 0)[1:]:
        term = numpy.where(done, 0, term)
        bound = partial + term
        done = done | (bound == partial)
        partial = bound
        kept.append(term)
    return sum_backwards(numpy.stack(kept, -1))

EM_ORDER = 8
"""Number of Bernoulli terms in the Euler-Maclaurin tail."""

_j = numpy.arange(1, EM_ORDER + 1)
_em_coef = _bernoulli.bernoulli(2 * _j) / _gamma.fact(2 * _j)

def tail(series, s, n=MAXTERMS):
    """
    The sum of the terms with k > n of a series without alternating signs,
    by the Euler-Maclaurin formula

        a^-s (a / (stride (s - 1)) + 1/2
              + sum_j B_2j / (2j)! (s)_(2j-1) (stride / a)^(2j-1)),

    with a = 1 + stride (n + 1) the first base left out. Valid for s > 1.
    """
    s = numpy.asarray(s)
    a = _precision.EXTENDED(1 + series.stride * (n + 1))
    h = series.stride / a
    m = numpy.arange(2 * EM_ORDER - 1)
    poch = numpy.cumprod(s[..., None] + m, -1)[..., ::2] # (s)_1, (s)_3, ...
    corr = sum_backwards(_em_coef * poch * h ** (2 * _j - 1))
    power = a ** -s
    out = power * (a / (series.stride * (s - 1)) + 0.5 + corr)
    return numpy.where(power == 0, 0, out)

def star_positive(series, s):
    """ the series minus 1 for s >= 0 """
    s = numpy.asarray(s)
    return numpy.where(s < CUTOVER, accelerated(series, s), direct(series, s))

def _gen_weights(n): # pragma: no cover
    # d_k = n sum_{i=k}^n (n + i - 1)! 4^i / ((n - i)! (2i)!)
    import mpmath
    with mpmath.workdps(50):
        return [
            mpmath.nstr(n * mpmath.fsum(
                mpmath.factorial(n + i - 1) * 4 ** i
                / (mpmath.factorial(n - i) * mpmath.factorial(2 * i))
                for i in range(k, n + 1)
            ), 22)
            for k in range(n + 1)
        ]

_weights = [ # = _gen_weights(28)
    '1.362725501650887306817e+21',
    '1.362725501650887306816e+21',
    '1.362725501650887305248e+21',
    '1.362725501650886896000e+21',
    '1.362725501650844334208e+21',
    '1.362725501648488235008e+21',
    '1.362725501568066715648e+21',
    '1.362725499718371770368e+21',
    '1.362725469310199922688e+21',
    '1.362725096810094788608e+21',
    '1.362721590926752350208e+21',
    '1.362695647390018306048e+21',
    '1.362542007743905005568e+21',
    '1.361803869444099801088e+21',
    '1.358896740140251611136e+21',
    '1.349437033675348770816e+21',
    '1.323863206542645919744e+21',
    '1.266218975223368122368e+21',
    '1.157712186857668739072e+21',
    '9.872015194258554224640e+20',
    '7.640581139674368573440e+20',
    '5.220333434317674905600e+20',
    '3.061506212814840135680e+20',
    '1.496014168469232680960e+20',
    '5.884825485587356057600e+19',
    '1.781624012587768217600e+19',
    '3.882102878793367552000e+18',
    '5.404319552844595200000e+17',
    '3.602879701896396800000e+16',
]

WEIGHTS = _precision.xarray(_weights)
