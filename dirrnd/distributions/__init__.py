from .dirichlet import Dirichlet
from .distribution import Distribution

__all__ = [
    "Distribution",
    "Dirichlet",
]
