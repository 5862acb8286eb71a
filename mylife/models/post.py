# mylife/models/post.py
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING
import uuid
from datetime import datetime
from mylife.core.timestamps import utcnow, utc_column

if TYPE_CHECKING:
    from mylife.models.profile import Profile

class Post(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    profile_id: uuid.UUID = Field(foreign_key="profile.id", index=True)
    title: str
    description: str
    is_private: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utcnow, sa_column=utc_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=utc_column())

    profile: Optional["Profile"] = Relationship(back_populates="posts")
