from abc import ABC, abstractmethod
from typing import Dict, Tuple, Union

import jax
from jax import numpy as jnp

from .constraints import Constraint


class Distribution(ABC):
    """Represents a probability distribution.

    A distribution is an object that can generate samples and to which a
    log-probability distribution function (logpdf) is associated.

    We follow Tensorflow Distribution's shape system _[1] which decomposes
    shapes along three dimensions:

    - *sample_shape:* independent, identically distributed samples from the same
      distribution;
    - *batch_shape:* independent samples from different distributions;
    - *event_shape:* shape of a single draw from a distribution;

    Each distribution is defined on a support, and computing the logpdf
    outside of the support returns -infinity. The `logpdf` method is wrapped
    by a decorator that checks whether arguments belong to the support.

    Attributes
    ----------
    parameters: Dict
        The constraints on the values of the parameters.
    support: Constraint
        The support of the logpdf.
    batch_shape: Tuple
        Describes independant samples from different distributions.
    event_shape: Tuple
        Shape of a single draw from the distribution.

    References
    ----------
    ..[1] Dillon, J. V., Langmore, I., Tran, D., Brevdo, E., Vasudevan, S.,
          Moore, D., ... & Saurous, R. A. (2017). Tensorflow distributions.
          arXiv preprint arXiv:1711.10604. (section 3.3)
    """

    parameters: Dict[str, Constraint]
    support: Constraint
    batch_shape: Tuple[int, ...]
    event_shape: Tuple[int, ...]

    @abstractmethod
    def __init__(self, *args) -> None:
        pass

    @abstractmethod
    def sample(
        self, rng_key: jnp.ndarray, sample_shape: Union[Tuple[()], Tuple[int, ...]]
    ) -> jax.Array:
        """Obtain samples from the distribution.

        Parameters
        ----------
        rng_key: jnp.ndarray
            The pseudo random number generator key to use to draw samples.
        sample_shape: Tuple[int]
            The number of independant, identically distributed samples to draw
            from the distribution.

        Returns
        -------
        jax.Array
            An array of shape sample_shape + batch_shape + event_shape with independent samples.
        """
        pass

    def forward(
        self,
        rng_key: jnp.ndarray,
        sample_shape: Union[Tuple[()], Tuple[int, ...]] = (),
    ) -> jax.Array:
        """Generate forward samples from the distribution."""
        return self.sample(rng_key, sample_shape)

    @abstractmethod
    def logpdf(self, x: jax.Array) -> jax.Array:
        """Compute the value of the log-probability density function at a given
        point.

        Parameters
        ----------
        x: jax.Array, shape (n_points, *event_shape)
            The point(s) at which to evaluate the log probability density function.

        Returns
        -------
        jax.Array, shape (n_points,)
            The value(s) of the log-probability density function.
        """
        pass

    def logpdf_sum(self, data):
        """Return the logpdf of the distribution over the observations."""
        return jnp.sum(self.logpdf(data))

    def __str__(self):
        """User-friendly representation of the probability distribution."""
        constraints_str = "\n  ".join(
            [f"{key}: {value!s}" for key, value in self.parameters.items()]
        )
        support_str = str(self.support)
        return (
            f"{self.__class__.__name__} distribution"
            + f"\n  batch_shape: {self.batch_shape}"
            + f"\n  event_shape: {self.event_shape}"
            + f"\n\nParameters\n  {constraints_str}"
            + f"\n\nSupport: {support_str}\n"
        )
