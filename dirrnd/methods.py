"""Selection of the Gamma variate generation strategy."""
from enum import Enum

from dirrnd.errors import InvalidArgument

__all__ = ["Method", "DEFAULT_METHOD"]


class Method(str, Enum):
    """Strategies available to draw the Gamma variates.

    BATCHED
        A single call to `jax.random.gamma` on the whole (N, K) matrix of
        shape parameters. The fastest option.
    COLUMNWISE
        One column at a time, with a compiled Marsaglia-Tsang sampler.
    PYTHON
        The same Marsaglia-Tsang sampler written in interpreted Python. The
        slowest option, kept as a portable fallback.
    """

    BATCHED = "batched"
    COLUMNWISE = "columnwise"
    PYTHON = "python"

    @classmethod
    def from_value(cls, value):
        """Return the method that corresponds to `value`.

        Strings are matched case-insensitively.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(repr(m.value) for m in cls)
        raise InvalidArgument(
            f"Unknown sampling method {value!r}, expected one of {choices}."
        )


DEFAULT_METHOD = Method.COLUMNWISE
