"""Draw samples from the Dirichlet distribution."""
import logging
import operator

import jax
import numpy as onp
from jax import numpy as jnp

from dirrnd.distributions import constraints
from dirrnd.errors import InvalidArgument, UpstreamGeneratorFailure
from dirrnd.gamma import get_generator
from dirrnd.methods import DEFAULT_METHOD, Method

__all__ = ["dirichlet", "normalize_log_rows", "validate_alpha", "validate_num_samples"]

logger = logging.getLogger(__name__)


def dirichlet(rng_key, alpha, num_samples, method=DEFAULT_METHOD) -> jax.Array:
    """Draw `num_samples` vectors from the Dirichlet distribution.

    If X_1, ..., X_K are independent Gamma(alpha_k, 1) random variables, then
    (X_1, ..., X_K) / sum_k X_k follows a Dirichlet(alpha) distribution _[1].
    We thus draw a matrix of Gamma variates and normalize each row. The
    variates are handled through their logarithm so that small concentrations
    do not underflow to rows of zeros.

    Parameters
    ----------
    rng_key: jnp.ndarray
        The pseudo random number generator key to use to draw samples.
    alpha: array_like, shape (K,)
        The concentration parameters, all strictly positive.
    num_samples: int
        The number of independent draws.
    method: Method or str
        The strategy used to draw Gamma variates; strings are matched
        case-insensitively. Defaults to `Method.COLUMNWISE`.

    Returns
    -------
    jax.Array, shape (num_samples, K)
        One Dirichlet draw per row; every row sums to one.

    Raises
    ------
    InvalidArgument
        If the method is unknown, `alpha` is empty or has a non-positive
        entry, or `num_samples` is not a positive integer.
    UpstreamGeneratorFailure
        If the Gamma variates cannot be normalized.

    References
    ----------
    ..[1] Gelman A, Carlin JB, Stern HS, Dunson DB, Vehtari A, Rubin DB (2013):
          "Bayesian Data Analysis". Chapman & Hall, 3rd edition, p. 583.
    """
    method = Method.from_value(method)
    alpha = validate_alpha(alpha)
    num_samples = validate_num_samples(num_samples)

    generator = get_generator(method)
    logger.debug(
        "Drawing %d Dirichlet samples of dimension %d with the %s method",
        num_samples,
        alpha.shape[0],
        method.value,
    )
    log_gammas = generator.log_sample_matrix(rng_key, alpha, num_samples)

    expected_shape = (num_samples, alpha.shape[0])
    if jnp.shape(log_gammas) != expected_shape:
        raise UpstreamGeneratorFailure(
            f"The {method.value} generator returned an array of shape "
            f"{jnp.shape(log_gammas)}, expected {expected_shape}."
        )

    return normalize_log_rows(log_gammas)


def normalize_log_rows(log_gammas) -> jax.Array:
    """Normalize every row of Gamma variates given by their logarithm.

    This computes `exp(log_gammas) / sum(exp(log_gammas), axis=-1)` with a
    softmax, which does not underflow when all the variates of a row are
    smaller than the smallest positive float.
    """
    # the logarithm of a negative variate is nan
    if jnp.any(jnp.isnan(log_gammas)):
        raise UpstreamGeneratorFailure(
            "The Gamma variates contain negative or NaN values."
        )
    if jnp.any(log_gammas == jnp.inf):
        raise UpstreamGeneratorFailure(
            "The Gamma variates contain non-finite values."
        )
    if not jnp.all(jnp.max(log_gammas, axis=-1) > -jnp.inf):
        raise UpstreamGeneratorFailure(
            "At least one row of Gamma variates sums to zero."
        )
    return jax.nn.softmax(log_gammas, axis=-1)


def validate_alpha(alpha) -> jax.Array:
    """Check the concentration parameters and return them as a vector of
    JAX's default float dtype."""
    try:
        values = onp.asarray(alpha, dtype=onp.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(
            f"The concentration parameters must be real numbers, got {alpha!r}."
        ) from e

    values = onp.atleast_1d(values)
    if values.ndim != 1:
        raise InvalidArgument(
            "The concentration parameters must be a vector, "
            f"got an array of shape {values.shape}."
        )
    if values.shape[0] == 0:
        raise InvalidArgument("At least one concentration parameter is required.")

    valid = constraints.strictly_positive(values) & constraints.real(values)
    if not onp.all(valid):
        raise InvalidArgument(
            "The concentration parameters must be finite and "
            f"{constraints.strictly_positive}, got {values.tolist()}."
        )

    alpha = jnp.asarray(values, dtype=jnp.result_type(float))
    if not jnp.all(constraints.strictly_positive(alpha) & constraints.real(alpha)):
        raise InvalidArgument(
            f"The concentration parameters {values.tolist()} cannot be "
            f"represented as {alpha.dtype} without becoming 0 or inf."
        )
    return alpha


def validate_num_samples(num_samples) -> int:
    """Check that the number of samples is a positive integer."""
    if isinstance(num_samples, bool):
        raise InvalidArgument("The number of samples must be an integer, got a bool.")
    try:
        num_samples = operator.index(num_samples)
    except TypeError as e:
        raise InvalidArgument(
            f"The number of samples must be an integer, got {num_samples!r}."
        ) from e

    if num_samples < 1:
        raise InvalidArgument(
            f"The number of samples must be {constraints.positive_integer}, "
            f"got {num_samples}."
        )
    return num_samples
