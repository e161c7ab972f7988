"""Google OAuth authentication use case"""

import logging
from typing import Callable, Dict, Optional

from google.oauth2 import id_token
from google.auth.transport import requests
from starlette.concurrency import run_in_threadpool

from ...domain.entities.user import User
from ...domain.exceptions import AuthenticationError
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import UserResponse, UserDto, TokenDto
from ...core.security import create_access_token
from ...core.config import settings

logger = logging.getLogger(__name__)


def verify_google_id_token(token: str) -> Dict:
    """Check signature, audience and expiry of a Google ID token"""
    if not settings.GOOGLE_CLIENT_ID:
        raise ValueError("Google OAuth is not configured on the server")
    return id_token.verify_oauth2_token(token, requests.Request(), settings.GOOGLE_CLIENT_ID)


class GoogleOAuthUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, verifier: Optional[Callable[[str], Dict]] = None):
        self.unit_of_work = unit_of_work
        self.verifier = verifier or verify_google_id_token

    async def execute(self, google_token: str) -> UserResponse:
        """Authenticate user with Google OAuth token"""
        try:
            # Fetches Google's certificates over the network
            idinfo = await run_in_threadpool(self.verifier, google_token)
        except ValueError as e:
            logger.warning(f"Google token rejected: {e}")
            raise AuthenticationError(f"Google authentication failed: {e}")

        subject = idinfo.get('sub')
        if not subject:
            raise AuthenticationError("Google token has no subject")

        profile = User(
            id=UserId(subject),
            email=idinfo.get('email'),
            first_name=idinfo.get('given_name'),
            last_name=idinfo.get('family_name'),
            profile_image_url=idinfo.get('picture'),
        )
        profile.record_login()

        async with self.unit_of_work:
            user = await self.unit_of_work.users.upsert(profile)
            await self.unit_of_work.commit()

        access_token = create_access_token(user.id.value, role=user.role.value)

        return UserResponse(
            user=UserDto.from_entity(user),
            tokens=TokenDto(access_token=access_token),
        )
