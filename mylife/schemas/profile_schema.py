# mylife/schemas/profile_schema.py
from typing import Optional
import uuid
from datetime import datetime
from mylife.schemas.base import CamelModel

class GetProfileResponse(CamelModel):
    id: uuid.UUID
    username: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
