# zetastar/_precision.py
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

""" extended-precision scalars and the conversions to standard precision """

import functools
import warnings

import numpy

from . import _utils

EXTENDED = numpy.longdouble
STANDARD = numpy.float64

def xconst(text):
    """ parse a decimal literal keeping all the digits the extended type can
    hold (going through a python float would truncate to 53 bits) """
    return EXTENDED(text)

def xarray(texts):
    return numpy.array([EXTENDED(t) for t in texts], EXTENDED)

_xinfo = numpy.finfo(EXTENDED)
XMAX = _xinfo.max
XEPS = _xinfo.eps
XMAXEXP = _xinfo.maxexp
XLOGMAX = numpy.log(XMAX)

PI = xconst('3.14159265358979323846264338327950288')
PI_2 = xconst('1.57079632679489661923132169163975144')
LN2 = xconst('0.693147180559945309417232121458176568')
LNPI = xconst('1.14472988584940017414342735135305871')
LNSQRT2PI = xconst('0.918938533204672741780329736405617640')

def is_truly_extended():
    """ True if the extended type has a longer mantissa than float64 """
    return _xinfo.eps < numpy.finfo(STANDARD).eps

if not is_truly_extended():
    warnings.warn(f'numpy.longdouble is not wider than float64 on this '
        f'platform (eps = {_xinfo.eps}), the extended-precision functions '
        f'will not be more accurate than the standard ones')

def saturate(x, dtype=STANDARD):
    """
    Convert `x` to `dtype`, replacing values whose magnitude reaches or
    exceeds the largest finite value of `dtype` with that value, sign
    preserved. NaN passes through.
    """
    x = numpy.asarray(x)
    top = numpy.finfo(dtype).max
    with numpy.errstate(invalid='ignore'):
        over = numpy.abs(x) >= top
    x = numpy.where(over, numpy.copysign(top, x), x)
    return x.astype(dtype)

def extended(kernel):
    """
    Decorator to make an extended-precision entry point out of an array
    kernel of one real argument. The argument is converted to `EXTENDED`,
    floating point warnings are silenced, and infinities in the output are
    replaced by the largest finite value.
    """

    @functools.wraps(kernel)
    def func(s):
        s = numpy.asarray(s, EXTENDED)
        with numpy.errstate(all='ignore'):
            out = kernel(s)
        return saturate(out, EXTENDED)[()]

    return func

def indexed(kernel):
    """
    Like `extended`, but for functions of an integer argument. Raises
    TypeError if the argument does not have an integer type. The kernel
    receives the argument as int64, whatever its integer type.
    """

    @functools.wraps(kernel)
    def func(n):
        n = numpy.asarray(n)
        if not numpy.issubdtype(n.dtype, numpy.integer):
            raise TypeError(f'argument must be an integer, found dtype {n.dtype}')
        n = n.astype(numpy.int64)
        with numpy.errstate(all='ignore'):
            out = kernel(n)
        return saturate(out, EXTENDED)[()]

    return func

def demote(xfunc, dtype=STANDARD):
    """
    Make the standard-precision version of an extended-precision function.

    Parameters
    ----------
    xfunc : callable
        A function whose name starts with 'x' returning extended-precision
        values.
    dtype : dtype
        The output type.

    Returns
    -------
    func : callable
        A function with the same signature and the name of `xfunc` without
        the 'x', which converts the result to `dtype` with `saturate`.
    """
    xname = xfunc.__name__
    assert xname.startswith('x'), xname
    name = xname[1:]

    @functools.wraps(xfunc)
    def func(*args):
        return saturate(xfunc(*args), dtype)[()]

    func.__name__ = name
    func.__qualname__ = name
    func.__doc__ = _utils.append_to_docstring(xfunc.__doc__, f"""
        
        Notes
        -----
        This is the {numpy.dtype(dtype).name} version of `{xname}`. The
        computation is carried out in extended precision, then values that
        do not fit are replaced by the largest finite {numpy.dtype(dtype).name}
        with the same sign.
    """)
    return func
