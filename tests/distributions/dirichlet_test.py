import math

import numpy as np
import pytest
from jax import numpy as jnp
from jax import random

from dirrnd import InvalidArgument, Method
from dirrnd.distributions import Dirichlet


@pytest.fixture
def rng_key():
    return random.PRNGKey(0)


def test_parameters_are_validated():
    with pytest.raises(InvalidArgument):
        Dirichlet(jnp.array([1.0, -1.0]))
    with pytest.raises(InvalidArgument):
        Dirichlet(jnp.array([1.0, 1.0]), method="spm")


def test_shapes():
    dist = Dirichlet(jnp.array([1.0, 2.0, 3.0]))
    assert dist.event_shape == (3,)
    assert dist.batch_shape == ()
    assert dist.method is Method.COLUMNWISE


def test_mean():
    dist = Dirichlet([1.0, 3.0])
    np.testing.assert_allclose(np.asarray(dist.mean), [0.25, 0.75])


def test_str():
    representation = str(Dirichlet([1.0, 1.0]))
    assert representation.startswith("Dirichlet distribution")
    assert "alpha: a real number > 0.0" in representation
    assert "probability simplex" in representation


#
# SAMPLING SHAPES
#

sample_shape_cases = [
    {"sample_shape": (), "expected_shape": (3,)},
    {"sample_shape": (100,), "expected_shape": (100, 3)},
    {"sample_shape": (10, 5), "expected_shape": (10, 5, 3)},
]


@pytest.mark.parametrize("method", list(Method))
@pytest.mark.parametrize("case", sample_shape_cases)
def test_sample_shape(rng_key, method, case):
    dist = Dirichlet(jnp.array([1.0, 2.0, 3.0]), method=method)
    samples = dist.sample(rng_key, case["sample_shape"])
    assert samples.shape == case["expected_shape"]


def test_forward(rng_key):
    dist = Dirichlet(jnp.array([1.0, 2.0]))
    assert jnp.array_equal(dist.forward(rng_key, (4,)), dist.sample(rng_key, (4,)))


@pytest.mark.parametrize("method", list(Method))
def test_sample_mean(rng_key, method):
    dist = Dirichlet(jnp.array([2.0, 3.0, 5.0]), method=method)
    samples = dist.sample(rng_key, (50_000,))
    np.testing.assert_allclose(
        np.asarray(jnp.mean(samples, axis=0)), np.asarray(dist.mean), atol=1e-2
    )


#
# LOGPDF CORRECTNESS
#

out_of_support_cases = [
    {"alpha": jnp.array([1.0, 1.0, 1.0]), "x": jnp.array([0.5, 0.6, 0.1])},
    {"alpha": jnp.array([1.0, 1.0, 1.0]), "x": jnp.array([-0.2, 0.6, 0.6])},
    {"alpha": jnp.array([2.0, 1.0]), "x": jnp.array([0.2, 0.2])},
]


@pytest.mark.parametrize("case", out_of_support_cases)
def test_logpdf_out_of_support(case):
    logprob = Dirichlet(case["alpha"]).logpdf(case["x"])
    assert logprob == -jnp.inf


logpdf_value_cases = [
    # flat Dirichlet: density is Gamma(K) everywhere on the simplex
    {"alpha": [1.0, 1.0, 1.0], "x": [0.2, 0.3, 0.5], "expected": math.log(2.0)},
    {"alpha": [1.0, 1.0, 1.0, 1.0], "x": [0.1, 0.2, 0.3, 0.4], "expected": math.log(6.0)},
    # Dirichlet(2, 1) is Beta(2, 1) with density 2x
    {"alpha": [2.0, 1.0], "x": [0.3, 0.7], "expected": math.log(0.6)},
    # Dirichlet(2, 2) is Beta(2, 2) with density 6x(1-x)
    {"alpha": [2.0, 2.0], "x": [0.5, 0.5], "expected": math.log(1.5)},
]


@pytest.mark.parametrize("case", logpdf_value_cases)
def test_logpdf_value(case):
    logprob = Dirichlet(case["alpha"]).logpdf(jnp.array(case["x"]))
    assert logprob.item() == pytest.approx(case["expected"], rel=1e-5)


def test_logpdf_shape():
    dist = Dirichlet([1.0, 2.0, 3.0])
    x = jnp.array([[0.2, 0.3, 0.5], [0.1, 0.1, 0.8]])
    assert dist.logpdf(x).shape == (2,)


def test_logpdf_sum():
    dist = Dirichlet([2.0, 1.0])
    x = jnp.array([[0.3, 0.7], [0.5, 0.5]])
    assert dist.logpdf_sum(x).item() == pytest.approx(math.log(0.6) + math.log(1.0))
