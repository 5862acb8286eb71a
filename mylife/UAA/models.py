# mylife/UAA/models.py
from sqlmodel import SQLModel, Field, Column, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import datetime
import uuid
from pydantic import EmailStr
from sqlalchemy import String
from mylife.core.timestamps import utcnow, utc_column

if TYPE_CHECKING:
    from mylife.models.profile import Profile

class User(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: EmailStr = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    username: str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    hashed_password: str
    is_active: bool = Field(default=True)
    is_superuser: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow, sa_column=utc_column())
    last_login: Optional[datetime] = Field(default=None, sa_column=utc_column(nullable=True))

    profile: Optional["Profile"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"uselist": False},
    )
