"""Shared fixtures: in-memory database, entity builders and mocked collaborators."""

import uuid

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# registers every table on SQLModel.metadata
from mylife.infrastructure.database import init_db
from mylife.infrastructure.post_repo import PostRepository
from mylife.models.post import Post
from mylife.models.profile import Profile
from mylife.services.authenticated_profile_service import AuthenticatedProfileService
from mylife.UAA.models import User


def make_user(username: str = "alice") -> User:
    return User(
        id=uuid.uuid4(),
        email=f"{username}@example.com",
        username=username,
        hashed_password="not-a-real-hash",
    )


def make_profile(user: User | None = None) -> Profile:
    user = user or make_user()
    profile = Profile(id=uuid.uuid4(), user_id=user.id, bio=f"{user.username}'s bio")
    profile.user = user
    return profile


def make_post(profile: Profile, title: str = "Testing", is_private: bool = False) -> Post:
    post = Post(
        id=uuid.uuid4(),
        profile_id=profile.id,
        title=title,
        description=f"{title} description",
        is_private=is_private,
    )
    post.profile = profile
    return post


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(eng)
    try:
        yield eng
    finally:
        async with eng.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await eng.dispose()


@pytest.fixture
async def session(engine):
    async with AsyncSession(engine, expire_on_commit=False) as s:
        yield s


@pytest.fixture
def post_repo(mocker):
    return mocker.AsyncMock(spec=PostRepository)


@pytest.fixture
def owner() -> Profile:
    return make_profile(make_user("owner"))


@pytest.fixture
def stranger() -> Profile:
    return make_profile(make_user("stranger"))


@pytest.fixture
def profile_service(mocker, owner):
    svc = mocker.AsyncMock(spec=AuthenticatedProfileService)
    svc.get_authenticated_profile.return_value = owner
    return svc
