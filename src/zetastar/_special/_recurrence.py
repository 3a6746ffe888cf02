# zetastar/_special/_recurrence.py
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

""" tabulated sequences extended with the two-term recurrence between even
terms of the Bernoulli and Euler numbers """

import collections

import numpy

from .. import _precision

TabulatedSequence = collections.namedtuple('TabulatedSequence', [
    'dense',    # values at indices 0, 2, 4, ...
    'sparse',   # values at indices start, start + spacing, ...
    'start',
    'spacing',
    'ratio',    # a[k + 2] / a[k] -> -(k + 2)(k + 1) / ratio for large k
    'maxindex', # largest index with a finite extended-precision value
    'sign',     # sign of the terms with index multiple of 4 past maxindex
])

def maxdense(seq):
    """ the largest index covered by the dense table """
    return 2 * (len(seq.dense) - 1)

def iterate(seq, value, k, n):
    """
    Move one step of 2 from index `k` towards index `n`. Returns the new
    value and index. Where `k == n` nothing changes.
    """
    up = k < n
    down = k > n
    kup = k + 2
    vup = value * -(kup * (kup - 1))
    vup = vup / seq.ratio
    vdown = value * -seq.ratio
    vdown = vdown / (k * (k - 1))
    value = numpy.where(up, vup, numpy.where(down, vdown, value))
    k = numpy.where(up, kup, numpy.where(down, k - 2, k))
    return value, k

def even_term(seq, n):
    """
    Compute the term with even index `n >= 0`. Indices within the dense table
    are looked up, larger ones are obtained iterating from the nearest
    sparse entry, indices beyond `maxindex` give the largest finite value
    with the sign the term would have.
    """
    n = numpy.asarray(n)
    dense = seq.dense[numpy.clip(n // 2, 0, len(seq.dense) - 1)]

    j = (n - seq.start + seq.spacing // 2) // seq.spacing
    j = numpy.clip(j, 0, len(seq.sparse) - 1)
    k = seq.start + seq.spacing * j
    value = seq.sparse[j]
    for _ in range(seq.spacing // 4):
        value, k = iterate(seq, value, k, n)

    alternate = numpy.where(n // 2 % 2, -1, 1)
    overflow = seq.sign * alternate * _precision.XMAX
    value = numpy.where(n > seq.maxindex, overflow, value)
    return numpy.where(n <= maxdense(seq), dense, value)

def check_index(n):
    if numpy.any(n < 0):
        raise ValueError(f'index must be non-negative, found {numpy.min(n)}')

def index_range(start, length, step):
    """ the indices start, start + step, ... of a sequence of given length """
    start = int(start)
    length = int(length)
    if length < 0:
        raise ValueError(f'length must be non-negative, found {length}')
    return numpy.arange(start, start + step * length, step)
