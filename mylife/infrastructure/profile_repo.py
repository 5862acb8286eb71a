# mylife/infrastructure/profile_repo.py
from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from mylife.models.profile import Profile
import uuid

class ProfileRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def profile_exists(self, id: uuid.UUID) -> bool:
        q = select(Profile.id).where(Profile.id == id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none() is not None

    async def get_by_id(self, id: uuid.UUID) -> Optional[Profile]:
        q = select(Profile).where(Profile.id == id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def get_by_user_id(self, user_id: uuid.UUID) -> Optional[Profile]:
        q = select(Profile).where(Profile.user_id == user_id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        return profile
