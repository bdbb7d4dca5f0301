"""RemoteData — state of an asynchronously fetched value.

One of four variants::

    NotAsked   nothing requested yet
    Loading    request in flight
    Success    payload available
    Failure    request failed, carries a list of errors
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ErrorDetail:
    """User-facing error pair, rendered as a title above a detail line."""

    title: str
    detail: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "detail": self.detail}


class RemoteData(Generic[T]):
    """Base of the four variants; use the static constructors."""

    __slots__ = ()

    def is_not_asked(self) -> bool:
        return False

    def is_loading(self) -> bool:
        return False

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> "RemoteData[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def match(
        self,
        *,
        not_asked: Callable[[], U],
        loading: Callable[[], U],
        success: Callable[[T], U],
        failure: Callable[[list[Any]], U],
    ) -> U:
        raise NotImplementedError

    @staticmethod
    def not_asked() -> "NotAsked":
        return NotAsked()

    @staticmethod
    def loading() -> "Loading":
        return Loading()

    @staticmethod
    def success(payload: T) -> "Success[T]":
        return Success(payload)

    @staticmethod
    def failure(errors: Sequence[Any]) -> "Failure":
        return Failure(errors)


class NotAsked(RemoteData[Any]):
    __slots__ = ()

    def is_not_asked(self) -> bool:
        return True

    def match(self, *, not_asked, loading, success, failure):  # noqa: ARG002
        return not_asked()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NotAsked)

    def __hash__(self) -> int:
        return hash(NotAsked)

    def __repr__(self) -> str:
        return "NotAsked()"


class Loading(RemoteData[Any]):
    __slots__ = ()

    def is_loading(self) -> bool:
        return True

    def match(self, *, not_asked, loading, success, failure):  # noqa: ARG002
        return loading()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Loading)

    def __hash__(self) -> int:
        return hash(Loading)

    def __repr__(self) -> str:
        return "Loading()"


class Success(RemoteData[T]):
    """Loaded variant, holds the payload."""

    __slots__ = ("_payload",)

    def __init__(self, payload: T) -> None:
        self._payload = payload

    @property
    def payload(self) -> T:
        return self._payload

    def is_success(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> "Success[U]":
        return Success(func(self._payload))

    def match(self, *, not_asked, loading, success, failure):  # noqa: ARG002
        return success(self._payload)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success) and other._payload == self._payload

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Success({self._payload!r})"


class Failure(RemoteData[Any]):
    """Failed variant, holds the errors reported by the source."""

    __slots__ = ("_errors",)

    def __init__(self, errors: Sequence[Any]) -> None:
        self._errors = list(errors)

    @property
    def errors(self) -> list[Any]:
        return list(self._errors)

    def is_failure(self) -> bool:
        return True

    def match(self, *, not_asked, loading, success, failure):  # noqa: ARG002
        return failure(list(self._errors))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure) and other._errors == self._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Failure({self._errors!r})"


__all__ = ["ErrorDetail", "Failure", "Loading", "NotAsked", "RemoteData", "Success"]
