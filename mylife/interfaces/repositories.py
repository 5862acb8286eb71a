# mylife/interfaces/repositories.py
from typing import List, Optional, Protocol
import uuid

from mylife.models.post import Post
from mylife.models.profile import Profile


class IPostRepository(Protocol):
    """
    Persistence contract the post service depends on.
    PostRepository is the SQLModel-backed implementation.
    """

    async def get_public_posts(self) -> List[Post]:
        """Non-private posts, newest first."""
        ...

    async def post_exists(self, id: uuid.UUID) -> bool: ...

    async def get_post_details(self, id: uuid.UUID) -> Optional[Post]:
        """Post with `profile` and `profile.user` populated."""
        ...

    async def get_by_id(self, id: uuid.UUID) -> Optional[Post]: ...

    async def create(self, post: Post) -> Post: ...

    async def save(self) -> None:
        """Persist pending mutations on posts already fetched."""
        ...

    async def delete(self, post: Post) -> None: ...


class IProfileRepository(Protocol):
    async def profile_exists(self, id: uuid.UUID) -> bool: ...

    async def get_by_id(self, id: uuid.UUID) -> Optional[Profile]: ...

    async def get_by_user_id(self, user_id: uuid.UUID) -> Optional[Profile]: ...

    async def create(self, profile: Profile) -> Profile: ...
