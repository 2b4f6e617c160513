from dirrnd.distributions import Dirichlet
from dirrnd.errors import DirrndError, InvalidArgument, UpstreamGeneratorFailure
from dirrnd.gamma import GammaGenerator, get_generator
from dirrnd.methods import DEFAULT_METHOD, Method
from dirrnd.sample import dirichlet

from . import distributions

__version__ = "0.1.0"

__all__ = [
    "distributions",
    "dirichlet",
    "Dirichlet",
    "Method",
    "DEFAULT_METHOD",
    "GammaGenerator",
    "get_generator",
    "DirrndError",
    "InvalidArgument",
    "UpstreamGeneratorFailure",
]
