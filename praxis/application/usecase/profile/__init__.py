"""Profile use cases."""

from .get_profile import GetProfileResponse, GetProfileUseCase

__all__ = ["GetProfileResponse", "GetProfileUseCase"]
