"""Result, Response, and ServiceError: the service outcome contract.

INVARIANT: Query-style service methods return :class:`Result`, command-style
methods return :class:`Response`.  Failures are reported, never raised
past the service boundary.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ErrorCode(StrEnum):
    """Machine-readable failure categories."""

    INVALID_ID = "invalid_id"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_OFFERED = "not_offered"
    INVALID_COMPLAINT = "invalid_complaint"
    INVALID_HANDLER = "invalid_handler"
    STORE_ERROR = "store_error"
    DECODE_ERROR = "decode_error"


class ServiceError(BaseModel):
    """Structured error payload within a Result or Response."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class Result(BaseModel, Generic[T]):
    """Outcome of a query: exactly one of ``value`` or ``error`` is set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T | None = None
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> Self:
        if (self.value is None) == (self.error is None):
            msg = "Result requires exactly one of value or error"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, code: ErrorCode, message: str, **detail: Any) -> Result[T]:
        return cls(error=ServiceError(code=code, message=message, detail=detail))


class Response(BaseModel):
    """Outcome of a command: a success flag plus an error iff it failed."""

    model_config = ConfigDict(frozen=True)

    success: bool
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_iff_failed(self) -> Self:
        if self.success == (self.error is not None):
            msg = "Response carries an error if and only if success is False"
            raise ValueError(msg)
        return self

    @property
    def ok(self) -> bool:
        return self.success

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @classmethod
    def succeeded(cls) -> Response:
        return cls(success=True)

    @classmethod
    def failed(cls, code: ErrorCode, message: str, **detail: Any) -> Response:
        return cls(success=False, error=ServiceError(code=code, message=message, detail=detail))
