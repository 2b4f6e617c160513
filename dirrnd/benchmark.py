"""Compare the speed of the Gamma generation strategies."""
import logging
import time
from typing import Dict, NamedTuple

from jax import random
from tqdm import tqdm

from dirrnd.errors import InvalidArgument
from dirrnd.methods import Method
from dirrnd.sample import dirichlet

__all__ = ["Timing", "benchmark"]

logger = logging.getLogger(__name__)


class Timing(NamedTuple):
    best: float
    mean: float


def benchmark(
    rng_key,
    alpha,
    num_samples,
    methods=None,
    num_repeats=5,
    progress_bar=True,
) -> Dict[Method, Timing]:
    """Time the Dirichlet sampler with each Gamma generation strategy.

    Each method is called once before timing so that compilation time is not
    counted, then `num_repeats` times with fresh keys. We wait until the
    results are computed before stopping the clock since JAX dispatches
    computations asynchronously.

    Parameters
    ----------
    rng_key: jnp.ndarray
        The pseudo random number generator key.
    alpha: array_like, shape (K,)
        The concentration parameters.
    num_samples: int
        The number of draws per call.
    methods: iterable of Method or str, optional
        The methods to time. Defaults to every method.
    num_repeats: int
        The number of timed calls per method.
    progress_bar: bool
        Whether to display a progress bar.

    Returns
    -------
    A dictionary that maps each method to its best and mean wall time, in
    seconds.
    """
    if methods is None:
        methods = list(Method)
    else:
        methods = [Method.from_value(method) for method in methods]
    if num_repeats < 1:
        raise InvalidArgument(
            f"The number of repetitions must be >= 1, got {num_repeats}."
        )

    timings = {}
    method_keys = random.split(rng_key, len(methods))
    with tqdm(
        total=len(methods) * num_repeats, unit="draws", disable=not progress_bar
    ) as progress:
        for method, method_key in zip(methods, method_keys):
            progress.set_description(method.value)
            warmup_key, *keys = random.split(method_key, num_repeats + 1)
            dirichlet(warmup_key, alpha, num_samples, method).block_until_ready()

            durations = []
            for key in keys:
                start = time.perf_counter()
                dirichlet(key, alpha, num_samples, method).block_until_ready()
                durations.append(time.perf_counter() - start)
                progress.update(1)

            timings[method] = Timing(min(durations), sum(durations) / len(durations))
            logger.debug(
                "%s: best %.4fs, mean %.4fs",
                method.value,
                timings[method].best,
                timings[method].mean,
            )

    return timings
