# The implementation follows the design in PyTorch: torch.distributions.constraints.py
# and the modifications made in Numpyro: numpyro.distributions.constraints
#
# Copyright (c) 2019-     The Numpyro project
# Copyright (c) 2016-     Facebook, Inc            (Adam Paszke)
# Copyright (c) 2014-     Facebook, Inc            (Soumith Chintala)
# Copyright (c) 2011-2014 Idiap Research Institute (Ronan Collobert)
# Copyright (c) 2012-2014 Deepmind Technologies    (Koray Kavukcuoglu)
# Copyright (c) 2011-2012 NEC Laboratories America (Koray Kavukcuoglu)
# Copyright (c) 2011-2013 NYU                      (Clement Farabet)
# Copyright (c) 2006-2010 NEC Laboratories America (Ronan Collobert, Leon Bottou, Iain Melvin, Jason Weston)
# Copyright (c) 2006      Idiap Research Institute (Samy Bengio)
# Copyright (c) 2001-2004 Idiap Research Institute (Ronan Collobert, Samy Bengio, Johnny Mariethoz)
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT OWNER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
from abc import ABC, abstractmethod

from jax import numpy as jnp

__all__ = [
    "limit_to_support",
    "positive_integer",
    "real",
    "simplex",
    "strictly_positive",
]


# Sourced from numpyro.distributions.utils.py
# Copyright Contributors to the NumPyro project.
# SPDX-License-Identifier: Apache-2.0
def limit_to_support(logpdf):
    """Decorator that enforces the distribution's support by returning `-jnp.inf`
    if the value passed to the logpdf is out of support.

    """

    def wrapper(self, *args):
        log_prob = logpdf(self, *args)
        value = args[0]
        mask = self.support(value)
        log_prob = jnp.where(mask, log_prob, -jnp.inf)
        return log_prob

    return wrapper


# ---------------------------------------------------------
#                  == CONSTRAINTS ==
# ---------------------------------------------------------


class Constraint(ABC):
    @abstractmethod
    def __call__(self, x):
        pass


class _StrictlyGreaterThan(Constraint):
    def __init__(self, lower_bound):
        self.lower_bound = lower_bound

    def __call__(self, x):
        return x > self.lower_bound

    def __str__(self):
        return f"a real number > {self.lower_bound}"


class _IntegerGreaterThan(Constraint):
    def __init__(self, lower_bound):
        self.lower_bound = lower_bound

    def __str__(self):
        return f"an integer > {self.lower_bound}"

    def __call__(self, x):
        return (x == jnp.floor(x)) & (x > self.lower_bound)


class _Real(Constraint):
    def __str__(self):
        return "a real number"

    def __call__(self, x):
        return jnp.isfinite(x)


class _Simplex(Constraint):
    def __init__(self, tolerance=1e-6):
        self.tolerance = tolerance

    def __str__(self):
        return (
            "a vector of non-negative numbers that sums to one "
            f"up to {self.tolerance} (probability simplex)"
        )

    def __call__(self, x):
        x_sum = jnp.sum(x, axis=-1)
        return jnp.all(x >= 0, axis=-1) & (jnp.abs(x_sum - 1) < self.tolerance)


positive_integer = _IntegerGreaterThan(0)
real = _Real()
simplex = _Simplex()
strictly_positive = _StrictlyGreaterThan(0.0)
