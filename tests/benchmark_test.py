import pytest
from jax import random

from dirrnd import InvalidArgument, Method
from dirrnd.benchmark import Timing, benchmark


@pytest.fixture
def rng_key():
    return random.PRNGKey(0)


def test_benchmark_all_methods(rng_key):
    timings = benchmark(rng_key, [1.0, 2.0, 3.0], 100, num_repeats=2, progress_bar=False)
    assert list(timings) == list(Method)
    for timing in timings.values():
        assert isinstance(timing, Timing)
        assert 0 <= timing.best <= timing.mean


def test_benchmark_selected_methods(rng_key):
    timings = benchmark(
        rng_key, [1.0, 1.0], 10, methods=["python", "BATCHED"], num_repeats=1,
        progress_bar=False,
    )
    assert list(timings) == [Method.PYTHON, Method.BATCHED]


def test_benchmark_invalid_arguments(rng_key):
    with pytest.raises(InvalidArgument):
        benchmark(rng_key, [1.0, 1.0], 10, methods=["spm"], progress_bar=False)
    with pytest.raises(InvalidArgument):
        benchmark(rng_key, [1.0, 1.0], 10, num_repeats=0, progress_bar=False)
