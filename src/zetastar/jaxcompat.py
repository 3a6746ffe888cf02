# zetastar/jaxcompat.py
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
The float64 functions of zetastar wrapped for use with jax.

The functions accept jax arrays and work under `jax.jit` and `jax.vmap`. The
computation is done by numpy on the host through `jax.pure_callback`, so
they are not differentiable. Without `jax_enable_x64` the results are cast to
float32, and the largest float64 used to mark poles and overflows becomes
infinity.
"""

from . import _jaxext
from . import _special

riemann_zeta = _jaxext.makejaxufunc(_special.riemann_zeta)
riemann_zeta_star = _jaxext.makejaxufunc(_special.riemann_zeta_star)
dirichlet_eta = _jaxext.makejaxufunc(_special.dirichlet_eta)
dirichlet_eta_star = _jaxext.makejaxufunc(_special.dirichlet_eta_star)
dirichlet_lambda = _jaxext.makejaxufunc(_special.dirichlet_lambda)
dirichlet_lambda_star = _jaxext.makejaxufunc(_special.dirichlet_lambda_star)
catalan_beta = _jaxext.makejaxufunc(_special.catalan_beta)
catalan_beta_star = _jaxext.makejaxufunc(_special.catalan_beta_star)
gamma = _jaxext.makejaxufunc(_special.gamma)
lgamma = _jaxext.makejaxufunc(_special.lgamma)

def _intfunc(f):
    return _jaxext.makejaxufunc(f, integer=True)

riemann_zeta_int = _intfunc(_special.riemann_zeta_int)
riemann_zeta_star_int = _intfunc(_special.riemann_zeta_star_int)
dirichlet_eta_int = _intfunc(_special.dirichlet_eta_int)
dirichlet_eta_star_int = _intfunc(_special.dirichlet_eta_star_int)
dirichlet_lambda_int = _intfunc(_special.dirichlet_lambda_int)
dirichlet_lambda_star_int = _intfunc(_special.dirichlet_lambda_star_int)
catalan_beta_int = _intfunc(_special.catalan_beta_int)
catalan_beta_star_int = _intfunc(_special.catalan_beta_star_int)
bernoulli_number = _intfunc(_special.bernoulli_number)
euler_number = _intfunc(_special.euler_number)
factorial = _intfunc(_special.factorial)
lnfactorial = _intfunc(_special.lnfactorial)
