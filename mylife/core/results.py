# mylife/core/results.py
"""
Use-case outcomes and their translation into the response envelope.

Services decide *what* happened by returning one of the outcome variants;
`present` is the only place that decides how an outcome looks on the wire,
so `is_success` always agrees with `status_code`.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from mylife.schemas.base import BaseResponse

R = TypeVar("R", bound=BaseResponse)


@dataclass(frozen=True)
class Ok:
    message: str = "Success"
    status_code: int = 200
    payload: Optional[Union[BaseModel, Mapping[str, Any]]] = None


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Forbidden:
    message: str


@dataclass(frozen=True)
class Invalid:
    reason: str
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Unauthenticated:
    message: str = "Authentication required"


Outcome = Union[Ok, NotFound, Forbidden, Invalid, Unauthenticated]


def _payload_fields(payload: Union[BaseModel, Mapping[str, Any], None]) -> dict:
    if payload is None:
        return {}
    # shallow: nested models are passed through as instances
    return dict(payload)


def present(outcome: Outcome, response_cls: Type[R] = BaseResponse) -> R:
    if isinstance(outcome, Ok):
        if not 200 <= outcome.status_code < 300:
            raise ValueError(f"Ok outcome needs a 2xx status, got {outcome.status_code}")
        return response_cls(
            message=outcome.message,
            is_success=True,
            status_code=outcome.status_code,
            **_payload_fields(outcome.payload),
        )
    if isinstance(outcome, NotFound):
        return response_cls(message=outcome.message, is_success=False, status_code=404)
    if isinstance(outcome, Forbidden):
        return response_cls(message=outcome.message, is_success=False, status_code=403)
    if isinstance(outcome, Invalid):
        return response_cls(
            message=outcome.reason,
            is_success=False,
            status_code=400,
            errors=list(outcome.errors),
        )
    if isinstance(outcome, Unauthenticated):
        return response_cls(message=outcome.message, is_success=False, status_code=401)
    raise TypeError(f"unknown outcome: {outcome!r}")
