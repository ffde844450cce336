"""42 profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from praxis.application.usecase.profile import GetProfileResponse, GetProfileUseCase
from praxis.interface.api.session import CurrentAccount

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


@router.get("/me", response_model=GetProfileResponse)
async def get_my_profile(
    account: CurrentAccount,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Profile of the authenticated caller."""
    return await get_profile_use_case.execute(account.login.root)


@router.get("/{login}", response_model=GetProfileResponse)
async def get_profile(
    login: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Public 42 profile by login.

    Projects the profile mentions are added to the catalogue on the way.

    Raises:
        NotFoundError: Unknown login (404)
        ProviderError: Intra unavailable (502)
    """
    return await get_profile_use_case.execute(login)
