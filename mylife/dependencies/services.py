# mylife/dependencies/services.py
from typing import Optional
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from mylife.UAA.models import User
from mylife.dependencies.auth import get_optional_current_user
from mylife.dependencies.db import get_session_dep
from mylife.infrastructure.post_repo import PostRepository
from mylife.infrastructure.profile_repo import ProfileRepository
from mylife.services.authenticated_profile_service import AuthenticatedProfileService
from mylife.services.post_service import PostService

async def get_post_service(
    session: AsyncSession = Depends(get_session_dep),
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> PostService:
    profile_service = AuthenticatedProfileService(current_user, ProfileRepository(session))
    return PostService(PostRepository(session), profile_service)
