# mylife/infrastructure/post_repo.py
from typing import Optional, List
from sqlalchemy.orm import selectinload
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from mylife.models.post import Post
from mylife.models.profile import Profile
import uuid

class PostRepository:
    """
    Repository for the Post entity.
    All methods are async and expect an AsyncSession to be injected from the outside.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_public_posts(self) -> List[Post]:
        q = (
            select(Post)
            .where(Post.is_private == False)  # noqa: E712
            .order_by(Post.created_at.desc())
        )
        res = await self.session.execute(q)
        return list(res.scalars().all())

    async def post_exists(self, id: uuid.UUID) -> bool:
        q = select(Post.id).where(Post.id == id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none() is not None

    async def get_post_details(self, id: uuid.UUID) -> Optional[Post]:
        """
        Fetch a post with its owning profile and the profile's user loaded.
        """
        q = (
            select(Post)
            .where(Post.id == id)
            .options(selectinload(Post.profile).selectinload(Profile.user))
        )
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def get_by_id(self, id: uuid.UUID) -> Optional[Post]:
        q = select(Post).where(Post.id == id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def create(self, post: Post) -> Post:
        """
        Persist a new Post and return refreshed instance.
        """
        self.session.add(post)
        await self.session.commit()
        await self.session.refresh(post)
        return post

    async def save(self) -> None:
        """
        Flush pending mutations on tracked posts.
        """
        await self.session.commit()

    async def delete(self, post: Post) -> None:
        await self.session.delete(post)
        await self.session.commit()
