# mylife/models/profile.py
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
import uuid
from datetime import datetime
from mylife.core.timestamps import utcnow, utc_column

if TYPE_CHECKING:
    from mylife.UAA.models import User
    from mylife.models.post import Post

class Profile(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="user.id", unique=True, index=True)
    bio: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=utc_column())

    user: Optional["User"] = Relationship(back_populates="profile")
    posts: List["Post"] = Relationship(back_populates="profile")
