import os
from typing import AsyncIterator
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import SQLModel
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
import structlog

# table modules must be imported so SQLModel.metadata knows every table
from mylife.UAA.models import User  # noqa: F401
from mylife.models.profile import Profile  # noqa: F401
from mylife.models.post import Post  # noqa: F401

logger = structlog.get_logger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./mylife.db")

engine: AsyncEngine = create_async_engine(DATABASE_URL, echo=False)


async def init_db(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    logger.info("db_initialized", url=bind.url.render_as_string(hide_password=True))


@asynccontextmanager
async def get_session(bind: AsyncEngine = engine) -> AsyncIterator[AsyncSession]:
    async with AsyncSession(bind, expire_on_commit=False) as session:
        yield session
