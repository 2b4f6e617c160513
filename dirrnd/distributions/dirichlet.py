import numpy as onp
from jax import numpy as jnp
from jax.scipy.special import gammaln, xlogy

from dirrnd.distributions import constraints
from dirrnd.distributions.distribution import Distribution
from dirrnd.methods import DEFAULT_METHOD, Method
from dirrnd.sample import dirichlet, validate_alpha


class Dirichlet(Distribution):
    parameters = {"alpha": constraints.strictly_positive}
    support = constraints.simplex

    def __init__(self, alpha, method=DEFAULT_METHOD):
        self.alpha = validate_alpha(alpha)
        self.method = Method.from_value(method)
        self.event_shape = self.alpha.shape
        self.batch_shape = ()

    @property
    def mean(self):
        return self.alpha / jnp.sum(self.alpha)

    def sample(self, rng_key, sample_shape=()):
        num_samples = int(onp.prod(sample_shape, dtype=int))
        samples = dirichlet(rng_key, self.alpha, num_samples, self.method)
        return jnp.reshape(samples, sample_shape + self.batch_shape + self.event_shape)

    @constraints.limit_to_support
    def logpdf(self, x):
        unnormalized = jnp.sum(xlogy(self.alpha - 1, x), axis=-1)
        normalization = jnp.sum(gammaln(self.alpha)) - gammaln(jnp.sum(self.alpha))
        return unnormalized - normalization
