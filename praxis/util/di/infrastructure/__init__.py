"""Infrastructure providers."""

# Import bases
from .fortytwo import FortyTwoProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .fortytwo import ProdFortyTwoProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "FortyTwoProvider",
    "PersistenceProvider",
    "ProdFortyTwoProvider",
    "ProdPersistenceProvider",
]
