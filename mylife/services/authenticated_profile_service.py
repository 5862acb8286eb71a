# mylife/services/authenticated_profile_service.py
from typing import Optional
import structlog

from mylife.UAA.models import User
from mylife.core.errors import UnauthenticatedError
from mylife.interfaces.repositories import IProfileRepository
from mylife.models.profile import Profile

logger = structlog.get_logger(__name__)

class AuthenticatedProfileService:
    """
    Resolves the profile of the caller behind the current request.
    `user` is None for anonymous requests; resolution then fails.
    """

    def __init__(self, user: Optional[User], profile_repo: IProfileRepository):
        self.user = user
        self.profile_repo = profile_repo

    async def get_authenticated_profile(self) -> Profile:
        if self.user is None:
            raise UnauthenticatedError("Authentication required")

        profile = await self.profile_repo.get_by_user_id(self.user.id)
        if profile is None:
            logger.warning("authenticated_user_without_profile", user_id=str(self.user.id))
            raise UnauthenticatedError("No profile for the authenticated user")
        return profile
