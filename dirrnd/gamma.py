"""Generators of standard Gamma variates.

The Dirichlet sampler only needs independent Gamma(alpha_k, 1) variates; how
they are produced is delegated to one of the generators below, selected by a
`Method`. All generators sample the same distribution and differ only in
speed:

- `BatchedGamma` draws the whole matrix with a single call to
  `jax.random.loggamma`;
- `ColumnwiseGamma` draws one column at a time with a jit-compiled
  implementation of Marsaglia and Tsang's squeeze method _[1];
- `PythonGamma` runs the same algorithm in interpreted Python.

Generators work with the logarithm of the variates. For small shape
parameters most of the mass of Gamma(a, 1) lies below the smallest positive
float, and the variates themselves underflow to zero. Shapes smaller than one
are handled with the boosting transform _[1]

    log Gamma(a) = log Gamma(a + 1) + log(U) / a,    U ~ Uniform(0, 1)

which stays finite for any representable `a`.

References
----------
..[1] Marsaglia, G., & Tsang, W. W. (2000). A simple method for generating
      gamma variables. ACM Transactions on Mathematical Software, 26(3),
      363-372.
"""
import math
import random as pyrandom
from abc import ABC, abstractmethod
from functools import partial
from typing import Dict

import jax
import numpy as onp
from jax import lax
from jax import numpy as jnp
from jax import random

from dirrnd.errors import InvalidArgument
from dirrnd.methods import Method

__all__ = [
    "GammaGenerator",
    "BatchedGamma",
    "ColumnwiseGamma",
    "PythonGamma",
    "GENERATORS",
    "get_generator",
]

_MAX_SEED = 2 ** 31 - 1


def _check_shape(shape, count):
    if not shape > 0:
        raise InvalidArgument(f"The shape parameter must be > 0, got {shape}.")
    if count < 1:
        raise InvalidArgument(f"The number of variates must be >= 1, got {count}.")


class GammaGenerator(ABC):
    """Produces independent Gamma(shape, scale) variates."""

    method: Method

    @abstractmethod
    def log_gamma_sample(self, rng_key, shape, count=1):
        """Draw the logarithm of `count` independent Gamma(shape, 1) variates.

        Parameters
        ----------
        rng_key: jnp.ndarray
            The pseudo random number generator key.
        shape: float
            The shape parameter, > 0.
        count: int
            The number of variates to draw.

        Returns
        -------
        jax.Array, shape (count,)
            The log-variates.
        """

    def gamma_sample(self, rng_key, shape, scale=1.0, count=1):
        """Draw `count` independent Gamma(shape, scale) variates.

        Variates smaller than the smallest positive float are returned as 0.
        """
        if not scale > 0:
            raise InvalidArgument(f"The scale parameter must be > 0, got {scale}.")
        return scale * jnp.exp(self.log_gamma_sample(rng_key, shape, count))

    def log_sample_matrix(self, rng_key, alpha, num_samples):
        """Draw a (num_samples, K) matrix whose k-th column holds the
        logarithm of Gamma(alpha[k], 1) variates.

        Columns are drawn one after the other, each with its own key.
        """
        keys = random.split(rng_key, alpha.shape[0])
        columns = [
            self.log_gamma_sample(key, a, num_samples)
            for key, a in zip(keys, onp.asarray(alpha).tolist())
        ]
        return jnp.stack(columns, axis=1)


# -------------------------------------------------------------------
#                 == LIBRARY SAMPLER ==
# -------------------------------------------------------------------


class BatchedGamma(GammaGenerator):
    method = Method.BATCHED

    def log_gamma_sample(self, rng_key, shape, count=1):
        _check_shape(shape, count)
        return random.loggamma(rng_key, shape, (count,))

    def log_sample_matrix(self, rng_key, alpha, num_samples):
        """Draw the whole matrix at once from the (num_samples, K) matrix of
        shape parameters."""
        shapes = jnp.broadcast_to(alpha, (num_samples,) + alpha.shape)
        return random.loggamma(rng_key, shapes)


# -------------------------------------------------------------------
#                 == COMPILED MARSAGLIA-TSANG ==
# -------------------------------------------------------------------


def _marsaglia_tsang(rng_key, a):
    """Draw the logarithm of one Gamma(a, 1) variate."""
    dtype = a.dtype
    boost = a < 1
    a_boosted = jnp.where(boost, a + 1, a)
    d = a_boosted - 1.0 / 3.0
    c = 1.0 / jnp.sqrt(9.0 * d)

    def cond_fn(state):
        _, _, accepted = state
        return ~accepted

    def body_fn(state):
        key, _, _ = state
        key, normal_key, uniform_key = random.split(key, 3)
        x = random.normal(normal_key, dtype=dtype)
        v = (1.0 + c * x) ** 3
        u = random.uniform(uniform_key, dtype=dtype, minval=jnp.finfo(dtype).tiny)
        squeeze = u < 1.0 - 0.0331 * x ** 4
        # log(v) is nan for v <= 0 and the comparison is then False
        full = jnp.log(u) < 0.5 * x ** 2 + d * (1.0 - v + jnp.log(v))
        accepted = (v > 0) & (squeeze | full)
        return key, d * v, accepted

    loop_key, boost_key = random.split(rng_key)
    init = (loop_key, jnp.ones((), dtype), jnp.array(False))
    _, variate, _ = lax.while_loop(cond_fn, body_fn, init)

    u = random.uniform(boost_key, dtype=dtype, minval=jnp.finfo(dtype).tiny)
    return jnp.log(variate) + jnp.where(boost, jnp.log(u) / a, 0.0)


@partial(jax.jit, static_argnums=(2,))
def _marsaglia_tsang_column(rng_key, a, count):
    keys = random.split(rng_key, count)
    return jax.vmap(_marsaglia_tsang, in_axes=(0, None))(keys, a)


class ColumnwiseGamma(GammaGenerator):
    method = Method.COLUMNWISE

    def log_gamma_sample(self, rng_key, shape, count=1):
        _check_shape(shape, count)
        a = jnp.asarray(shape, dtype=jnp.result_type(float))
        return _marsaglia_tsang_column(rng_key, a, int(count))


# -------------------------------------------------------------------
#                 == INTERPRETED MARSAGLIA-TSANG ==
# -------------------------------------------------------------------


def _python_marsaglia_tsang(rng, a):
    """Return the logarithm of one Gamma(a, 1) variate."""
    if a < 1:
        u = 1.0 - rng.random()
        return _python_marsaglia_tsang(rng, a + 1.0) + math.log(u) / a

    d = a - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = rng.gauss(0.0, 1.0)
        v = (1.0 + c * x) ** 3
        if v <= 0:
            continue
        u = 1.0 - rng.random()
        if u < 1.0 - 0.0331 * x ** 4:
            return math.log(d * v)
        if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
            return math.log(d * v)


class PythonGamma(GammaGenerator):
    """Marsaglia-Tsang sampler that only relies on the Python interpreter.

    The JAX key is only used to seed a `random.Random` stream, so that draws
    remain reproducible for a given key.
    """

    method = Method.PYTHON

    def log_gamma_sample(self, rng_key, shape, count=1):
        _check_shape(shape, count)
        seed = int(random.randint(rng_key, (), 0, _MAX_SEED))
        rng = pyrandom.Random(seed)
        shape = float(shape)
        log_variates = onp.fromiter(
            (_python_marsaglia_tsang(rng, shape) for _ in range(count)),
            dtype=onp.float64,
            count=count,
        )
        return jnp.asarray(log_variates, dtype=jnp.result_type(float))


GENERATORS: Dict[Method, GammaGenerator] = {
    Method.BATCHED: BatchedGamma(),
    Method.COLUMNWISE: ColumnwiseGamma(),
    Method.PYTHON: PythonGamma(),
}


def get_generator(method) -> GammaGenerator:
    """Return the generator registered for `method`."""
    return GENERATORS[Method.from_value(method)]
