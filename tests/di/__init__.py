"""Mock providers for testing."""

from .fortytwo import MockFortyTwoProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockFortyTwoProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
