# zetastar/_special/__init__.py
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

from ._bernoulli import (
    xbernoulli_number,
    bernoulli_number,
    xbernoulli_number_sequence,
    bernoulli_number_sequence,
    xbernoulli_even_index_sequence,
    bernoulli_even_index_sequence,
    xmax_bernoulli_even_index,
    max_bernoulli_even_index,
)
from ._euler import (
    xeuler_number,
    euler_number,
    xeuler_number_sequence,
    euler_number_sequence,
    xeuler_even_index_sequence,
    euler_even_index_sequence,
    xmax_euler_even_index,
    max_euler_even_index,
)
from ._gamma import (
    xgamma,
    gamma,
    xlgamma,
    lgamma,
    xfactorial,
    factorial,
    xlnfactorial,
    lnfactorial,
)
from ._zeta import (
    xriemann_zeta,
    riemann_zeta,
    xriemann_zeta_star,
    riemann_zeta_star,
)
from ._eta import (
    xdirichlet_eta,
    dirichlet_eta,
    xdirichlet_eta_star,
    dirichlet_eta_star,
)
from ._lambda import (
    xdirichlet_lambda,
    dirichlet_lambda,
    xdirichlet_lambda_star,
    dirichlet_lambda_star,
)
from ._beta import (
    xcatalan_beta,
    catalan_beta,
    xcatalan_beta_star,
    catalan_beta_star,
)
from ._intarg import (
    xriemann_zeta_int,
    riemann_zeta_int,
    xriemann_zeta_star_int,
    riemann_zeta_star_int,
    xdirichlet_eta_int,
    dirichlet_eta_int,
    xdirichlet_eta_star_int,
    dirichlet_eta_star_int,
    xdirichlet_lambda_int,
    dirichlet_lambda_int,
    xdirichlet_lambda_star_int,
    dirichlet_lambda_star_int,
    xcatalan_beta_int,
    catalan_beta_int,
    xcatalan_beta_star_int,
    catalan_beta_star_int,
)
