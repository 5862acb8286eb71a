# mylife/mappers/post_mapper.py
from typing import Optional

from mylife.core.timestamps import utcnow
from mylife.models.post import Post
from mylife.models.profile import Profile
from mylife.schemas.post_schema import (
    CreatePostRequest,
    GetPostsResponse,
    PostDetail,
    UpdatePostRequest,
)
from mylife.schemas.profile_schema import GetProfileResponse


def to_post_summary(post: Post) -> GetPostsResponse:
    return GetPostsResponse(
        id=post.id,
        title=post.title,
        description=post.description,
        created_at=post.created_at,
    )


def to_post_detail(post: Post) -> PostDetail:
    """Detail without the owner; callers embed the profile summary."""
    return PostDetail(
        id=post.id,
        title=post.title,
        description=post.description,
        is_private=post.is_private,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def to_profile_summary(profile: Profile) -> GetProfileResponse:
    user = profile.user
    username: Optional[str] = user.username if user is not None else None
    return GetProfileResponse(
        id=profile.id,
        username=username,
        bio=profile.bio,
        created_at=profile.created_at,
    )


def post_from_request(request: CreatePostRequest) -> Post:
    # owner is assigned by the caller from the authenticated profile
    return Post(
        title=request.title,
        description=request.description,
        is_private=request.is_private,
    )


def apply_update(post: Post, request: UpdatePostRequest) -> Post:
    post.title = request.title
    post.description = request.description
    post.is_private = request.is_private
    post.updated_at = utcnow()
    return post
