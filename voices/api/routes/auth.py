"""Authentication routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_user, get_unit_of_work
from ...application.dtos.user_dtos import GoogleOAuthDto, UserDto, UserResponse
from ...application.use_cases.google_oauth_use_case import GoogleOAuthUseCase
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.post("/google", response_model=UserResponse)
async def google_oauth(
    oauth_data: GoogleOAuthDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Sign in with a Google ID token"""
    return await GoogleOAuthUseCase(unit_of_work).execute(oauth_data.google_token)


@router.get("/user", response_model=UserDto)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user"""
    return UserDto.from_entity(current_user)
