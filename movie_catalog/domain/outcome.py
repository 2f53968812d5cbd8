"""Tagged results returned by every use case.

Use cases never raise for conditions they anticipate. They return one of the
outcome types below and the dispatcher maps each tag to an HTTP status.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    payload: T
    status: HTTPStatus = HTTPStatus.OK


@dataclass(frozen=True)
class NotFound:
    message: str = "Movie not found"


@dataclass(frozen=True)
class BadRequest:
    message: str


@dataclass(frozen=True)
class Conflict:
    message: str


@dataclass(frozen=True)
class InternalError:
    message: str = "Internal server error"


Outcome = Union[Ok[Any], NotFound, BadRequest, Conflict, InternalError]
