# mylife/services/post_service.py
import uuid
import structlog

from mylife.core.results import Forbidden, NotFound, Ok, present
from mylife.interfaces.repositories import IPostRepository
from mylife.mappers import post_mapper
from mylife.schemas.base import BaseResponse
from mylife.schemas.post_schema import (
    CreatePostRequest,
    DetailPostResponse,
    GetAllPostsResponse,
    UpdatePostRequest,
)
from mylife.services.authenticated_profile_service import AuthenticatedProfileService

logger = structlog.get_logger(__name__)

POST_NOT_FOUND = "Post not found"
POST_CREATED = "Post successfully created."
POST_UPDATED = "Post Successfully Updated"
POST_DELETED = "Post successfully deleted."
ONLY_CREATOR_CAN_UPDATE = "Only post creator can update the post."
ONLY_CREATOR_CAN_DELETE = "Only post creator can delete the post."

class PostService:
    def __init__(self, post_repo: IPostRepository, profile_service: AuthenticatedProfileService):
        self.post_repo = post_repo
        self.profile_service = profile_service

    async def get_public_posts(self) -> GetAllPostsResponse:
        posts = await self.post_repo.get_public_posts()
        summaries = [post_mapper.to_post_summary(p) for p in posts]
        return present(Ok(payload={"posts": summaries}), GetAllPostsResponse)

    async def get_post_by_id(self, post_id: uuid.UUID) -> DetailPostResponse:
        if not await self.post_repo.post_exists(post_id):
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND), DetailPostResponse)

        post = await self.post_repo.get_post_details(post_id)
        if post is None:
            # removed between the existence check and the fetch
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND), DetailPostResponse)
        detail = post_mapper.to_post_detail(post)
        detail.profile = post_mapper.to_profile_summary(post.profile)
        return present(Ok(payload=detail), DetailPostResponse)

    async def create_post(self, request: CreatePostRequest) -> BaseResponse:
        profile = await self.profile_service.get_authenticated_profile()

        post = post_mapper.post_from_request(request)
        post.profile_id = profile.id
        created = await self.post_repo.create(post)
        logger.info("post_created", post_id=str(created.id), profile_id=str(profile.id))
        return present(Ok(message=POST_CREATED, status_code=201))

    async def update_post(self, post_id: uuid.UUID, request: UpdatePostRequest) -> BaseResponse:
        profile = await self.profile_service.get_authenticated_profile()

        if not await self.post_repo.post_exists(post_id):
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND))

        post = await self.post_repo.get_by_id(post_id)
        if post is None:
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND))
        if post.profile_id != profile.id:
            logger.warning("post_update_forbidden", post_id=str(post_id), profile_id=str(profile.id))
            return present(Forbidden(ONLY_CREATOR_CAN_UPDATE))

        post_mapper.apply_update(post, request)
        await self.post_repo.save()
        logger.info("post_updated", post_id=str(post_id), profile_id=str(profile.id))
        return present(Ok(message=POST_UPDATED))

    async def delete_post(self, post_id: uuid.UUID) -> BaseResponse:
        profile = await self.profile_service.get_authenticated_profile()

        if not await self.post_repo.post_exists(post_id):
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND))

        post = await self.post_repo.get_by_id(post_id)
        if post is None:
            logger.info("post_not_found", post_id=str(post_id))
            return present(NotFound(POST_NOT_FOUND))
        if post.profile_id != profile.id:
            logger.warning("post_delete_forbidden", post_id=str(post_id), profile_id=str(profile.id))
            return present(Forbidden(ONLY_CREATOR_CAN_DELETE))

        await self.post_repo.delete(post)
        logger.info("post_deleted", post_id=str(post_id), profile_id=str(profile.id))
        return present(Ok(message=POST_DELETED))
