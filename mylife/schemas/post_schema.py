# mylife/schemas/post_schema.py
from pydantic import Field
from typing import List, Optional
import uuid
from datetime import datetime
from mylife.schemas.base import BaseResponse, CamelModel
from mylife.schemas.profile_schema import GetProfileResponse

class CreatePostRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    is_private: bool = False

class UpdatePostRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    is_private: bool = False

class GetPostsResponse(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    created_at: datetime

class PostDetail(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    is_private: bool
    created_at: datetime
    updated_at: datetime
    profile: Optional[GetProfileResponse] = None

class GetAllPostsResponse(BaseResponse):
    posts: List[GetPostsResponse] = Field(default_factory=list)

class DetailPostResponse(BaseResponse):
    # detail fields are empty when the post was not found
    id: Optional[uuid.UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    is_private: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    profile: Optional[GetProfileResponse] = None
