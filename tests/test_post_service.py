"""PostService against mocked repository and profile resolver."""

import uuid

import pytest

from conftest import make_post, make_profile, make_user
from mylife.core.errors import UnauthenticatedError
from mylife.schemas.post_schema import CreatePostRequest, UpdatePostRequest
from mylife.services.post_service import PostService


@pytest.fixture
def service(post_repo, profile_service) -> PostService:
    return PostService(post_repo, profile_service)


def _update_request() -> UpdatePostRequest:
    return UpdatePostRequest(
        title="Testing title",
        description="Testing update description",
        is_private=True,
    )


# ---------------------------------------------------------------------------
# get_public_posts
# ---------------------------------------------------------------------------


class TestGetPublicPosts:
    async def test_returns_mapped_summaries(self, service, post_repo, owner) -> None:
        posts = [make_post(owner, "First"), make_post(owner, "Second")]
        post_repo.get_public_posts.return_value = posts

        result = await service.get_public_posts()

        assert result.is_success is True
        assert result.status_code == 200
        assert result.message == "Success"
        assert [p.id for p in result.posts] == [p.id for p in posts]
        assert result.posts[0].title == "First"

    async def test_empty_store_returns_empty_list(self, service, post_repo) -> None:
        post_repo.get_public_posts.return_value = []

        result = await service.get_public_posts()

        assert result.status_code == 200
        assert result.posts == []

    async def test_repository_fault_propagates(self, service, post_repo) -> None:
        post_repo.get_public_posts.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            await service.get_public_posts()


# ---------------------------------------------------------------------------
# get_post_by_id
# ---------------------------------------------------------------------------


class TestGetPostById:
    async def test_existing_post_returns_detail_with_profile(self, service, post_repo, owner) -> None:
        post = make_post(owner)
        post_repo.post_exists.return_value = True
        post_repo.get_post_details.return_value = post

        result = await service.get_post_by_id(post.id)

        assert result.is_success is True
        assert result.status_code == 200
        assert result.message == "Success"
        assert result.title == post.title
        assert result.description == post.description
        assert result.profile.id == owner.id
        assert result.profile.username == "owner"
        post_repo.get_post_details.assert_awaited_once_with(post.id)

    async def test_missing_post_returns_not_found_without_payload(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = False

        result = await service.get_post_by_id(uuid.uuid4())

        assert result.is_success is False
        assert result.status_code == 404
        assert result.message == "Post not found"
        assert result.title is None
        assert result.profile is None
        post_repo.get_post_details.assert_not_awaited()

    async def test_post_removed_after_existence_check_is_not_found(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = True
        post_repo.get_post_details.return_value = None

        result = await service.get_post_by_id(uuid.uuid4())

        assert result.status_code == 404
        assert result.is_success is False
        assert result.profile is None


# ---------------------------------------------------------------------------
# create_post
# ---------------------------------------------------------------------------


class TestCreatePost:
    async def test_owner_is_the_authenticated_profile(self, service, post_repo, owner) -> None:
        post_repo.create.side_effect = lambda post: post
        request = CreatePostRequest(title="Testing", description="Testing description", is_private=False)

        result = await service.create_post(request)

        assert result.is_success is True
        assert result.status_code == 201
        assert result.message == "Post successfully created."
        created = post_repo.create.await_args.args[0]
        assert created.profile_id == owner.id
        assert created.title == "Testing"
        assert created.description == "Testing description"
        assert created.is_private is False

    async def test_owner_in_request_body_is_ignored(self, service, post_repo, owner) -> None:
        post_repo.create.side_effect = lambda post: post
        request = CreatePostRequest.model_validate(
            {"title": "Testing", "description": "Body", "profileId": str(uuid.uuid4())}
        )

        await service.create_post(request)

        assert post_repo.create.await_args.args[0].profile_id == owner.id

    async def test_unauthenticated_caller_persists_nothing(self, service, post_repo, profile_service) -> None:
        profile_service.get_authenticated_profile.side_effect = UnauthenticatedError()

        with pytest.raises(UnauthenticatedError):
            await service.create_post(CreatePostRequest(title="t", description="d"))
        post_repo.create.assert_not_awaited()


# ---------------------------------------------------------------------------
# update_post
# ---------------------------------------------------------------------------


class TestUpdatePost:
    async def test_owner_updates_existing_post(self, service, post_repo, owner) -> None:
        post = make_post(owner)
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = post

        result = await service.update_post(post.id, _update_request())

        assert result.is_success is True
        assert result.status_code == 200
        assert result.message == "Post Successfully Updated"
        assert post.title == "Testing title"
        assert post.description == "Testing update description"
        assert post.is_private is True
        post_repo.save.assert_awaited_once()

    async def test_missing_post_is_not_found_and_not_successful(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = False

        result = await service.update_post(uuid.uuid4(), _update_request())

        assert result.status_code == 404
        assert result.is_success is False
        assert result.message == "Post not found"
        post_repo.get_by_id.assert_not_awaited()
        post_repo.save.assert_not_awaited()

    async def test_post_removed_after_existence_check_is_not_found(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = None

        result = await service.update_post(uuid.uuid4(), _update_request())

        assert result.status_code == 404
        assert result.is_success is False
        post_repo.save.assert_not_awaited()

    async def test_non_owner_is_forbidden(self, service, post_repo, stranger) -> None:
        post = make_post(stranger)
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = post

        result = await service.update_post(post.id, _update_request())

        assert result.is_success is False
        assert result.status_code == 403
        assert result.message == "Only post creator can update the post."
        assert post.title == "Testing"
        post_repo.save.assert_not_awaited()

    async def test_identity_is_resolved_before_existence_check(self, service, post_repo, profile_service) -> None:
        profile_service.get_authenticated_profile.side_effect = UnauthenticatedError()

        with pytest.raises(UnauthenticatedError):
            await service.update_post(uuid.uuid4(), _update_request())
        post_repo.post_exists.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete_post
# ---------------------------------------------------------------------------


class TestDeletePost:
    async def test_owner_deletes_post(self, service, post_repo, owner) -> None:
        post = make_post(owner)
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = post

        result = await service.delete_post(post.id)

        assert result.is_success is True
        assert result.status_code == 200
        assert result.message == "Post successfully deleted."
        post_repo.delete.assert_awaited_once_with(post)

    async def test_missing_post_is_not_found(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = False

        result = await service.delete_post(uuid.uuid4())

        assert result.status_code == 404
        assert result.is_success is False
        post_repo.delete.assert_not_awaited()

    async def test_post_removed_after_existence_check_is_not_found(self, service, post_repo) -> None:
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = None

        result = await service.delete_post(uuid.uuid4())

        assert result.status_code == 404
        assert result.is_success is False
        post_repo.delete.assert_not_awaited()

    async def test_non_owner_is_forbidden(self, service, post_repo) -> None:
        post = make_post(make_profile(make_user("someone")))
        post_repo.post_exists.return_value = True
        post_repo.get_by_id.return_value = post

        result = await service.delete_post(post.id)

        assert result.status_code == 403
        assert result.message == "Only post creator can delete the post."
        post_repo.delete.assert_not_awaited()
