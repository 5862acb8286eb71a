"""Outcome → envelope translation."""

import pytest

from mylife.core.results import Forbidden, Invalid, NotFound, Ok, Unauthenticated, present
from mylife.schemas.base import BaseResponse
from mylife.schemas.post_schema import GetAllPostsResponse


@pytest.mark.parametrize(
    "outcome, status, success",
    [
        (Ok(), 200, True),
        (Ok(status_code=201), 201, True),
        (NotFound("Post not found"), 404, False),
        (Forbidden("nope"), 403, False),
        (Invalid("bad input"), 400, False),
        (Unauthenticated(), 401, False),
    ],
)
def test_success_flag_agrees_with_status(outcome, status, success) -> None:
    response = present(outcome)
    assert response.status_code == status
    assert response.is_success is success
    assert response.is_success == (200 <= response.status_code < 300)


def test_ok_rejects_non_2xx_status() -> None:
    with pytest.raises(ValueError):
        present(Ok(status_code=404))


def test_invalid_carries_errors() -> None:
    response = present(Invalid("Validation failed", ["title: too short"]))
    assert response.message == "Validation failed"
    assert response.errors == ["title: too short"]


def test_ok_payload_fills_specialised_response() -> None:
    response = present(Ok(payload={"posts": []}), GetAllPostsResponse)
    assert isinstance(response, GetAllPostsResponse)
    assert response.posts == []


def test_failure_outcome_leaves_payload_empty() -> None:
    response = present(NotFound("Post not found"), GetAllPostsResponse)
    assert response.posts == []
    assert response.is_success is False


def test_envelope_serialises_camel_case() -> None:
    body = present(Ok(message="Success")).model_dump(by_alias=True)
    assert body == {"message": "Success", "isSuccess": True, "statusCode": 200, "errors": []}


def test_unknown_outcome_is_rejected() -> None:
    with pytest.raises(TypeError):
        present(BaseResponse(message="x", is_success=True, status_code=200))
