# zetastar/_jaxext/__init__.py
#
# Copyright (c) 2023, 2024, 2026, Giacomo Petrillo
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
import jax
from jax import numpy as jnp

def makejaxufunc(ufunc, integer=False):
    """

    Wrap a numpy ufunc to add jax support.

    Parameters
    ----------
    ufunc : callable
        Elementwise function following numpy broadcasting rules, returning
        floating point values. Keyword arguments not supported.
    integer : bool, default False
        If True, the arguments must have an integer type, and a TypeError is
        raised at trace time otherwise.

    Return
    ------
    func : callable
        Wrapped `ufunc`. Supports jit and vmap, but the calculation is
        performed on cpu by numpy, and it is not differentiable.

    """

    @functools.wraps(ufunc)
    def func(*args):
        args = tuple(map(jnp.asarray, args))
        if integer:
            for a in args:
                if not jnp.issubdtype(a.dtype, jnp.integer):
                    raise TypeError(f'{ufunc.__name__} requires integer '
                        f'arguments, found dtype {a.dtype}')
        dtype = float_type(*args)
        def callback(*args):
            return numpy.asarray(ufunc(*args), dtype)
        return pure_callback_ufunc(callback, dtype, *args)

    return func

def float_type(*args):
    t = jnp.result_type(*args)
    return jnp.sin(jnp.empty(0, t)).dtype
    # numpy does this with common_type, but that supports only arrays, not
    # dtypes in the input. jnp.common_type is not defined.

def pure_callback_ufunc(callback, dtype, *args, **kwargs):
    """ version of jax.pure_callback that deals correctly with ufuncs,
    see https://github.com/google/jax/issues/17187 """
    shape = jnp.broadcast_shapes(*(a.shape for a in args))
    ndim = len(shape)
    padded_args = [
        jnp.expand_dims(a, tuple(range(ndim - a.ndim)))
        for a in args
    ]
    result = jax.ShapeDtypeStruct(shape, dtype)
    return jax.pure_callback(callback, result, *padded_args, vmap_method='expand_dims', **kwargs)
