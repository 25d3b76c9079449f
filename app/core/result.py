"""
Tagged success/failure result returned by repositories and services.

Data-access code never lets a driver exception escape: it returns
``Err(AppError(...))`` instead. Route handlers call ``unwrap()``, which
raises the matching ``PropertyManagerException`` so the exception handlers
in ``app.main`` render one error shape for every endpoint.
"""

from dataclasses import dataclass, field
from enum import Enum as PyEnum
from typing import Any, Callable, Generic, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import (
    PropertyManagerException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ValidationException,
    DataAccessException,
)

T = TypeVar("T")
U = TypeVar("U")


class ErrorCode(str, PyEnum):
    """Error codes shared by every endpoint"""

    # Authentication & Authorization
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    SESSION_EXPIRED = "SESSION_EXPIRED"

    # Data & Validation
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Database & External Services
    DATABASE_ERROR = "DATABASE_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


_EXCEPTION_FOR_CODE: dict[ErrorCode, type[PropertyManagerException]] = {
    ErrorCode.UNAUTHORIZED: UnauthorizedException,
    ErrorCode.SESSION_EXPIRED: UnauthorizedException,
    ErrorCode.FORBIDDEN: ForbiddenException,
    ErrorCode.NOT_FOUND: NotFoundException,
    ErrorCode.VALIDATION_ERROR: ValidationException,
    ErrorCode.INVALID_INPUT: ValidationException,
    ErrorCode.DATABASE_ERROR: DataAccessException,
}


@dataclass(frozen=True)
class AppError:
    """Error payload carried by ``Err``"""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_exception(self) -> PropertyManagerException:
        exc_class = _EXCEPTION_FOR_CODE.get(self.code, PropertyManagerException)
        return exc_class(self.message, code=self.code.value)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    error: AppError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error.to_exception()

    def unwrap_or(self, default):
        return default

    def map(self, fn) -> "Err":
        return self


Result = Union[Ok[T], Err]


def failure(code: ErrorCode, message: str, **details: Any) -> Err:
    """Shorthand for ``Err(AppError(code, message, details))``"""
    return Err(AppError(code=code, message=message, details=details))


def to_app_error(error: BaseException) -> AppError:
    """Convert an arbitrary exception into an AppError"""
    if isinstance(error, PropertyManagerException):
        try:
            code = ErrorCode(error.code)
        except ValueError:
            code = ErrorCode.INTERNAL_ERROR
        return AppError(code=code, message=str(error))

    if isinstance(error, SQLAlchemyError):
        return AppError(
            code=ErrorCode.DATABASE_ERROR,
            message=str(error.orig) if getattr(error, "orig", None) else str(error),
            details={"original_error": type(error).__name__},
        )

    if isinstance(error, Exception):
        return AppError(
            code=ErrorCode.INTERNAL_ERROR,
            message=str(error),
            details={"original_error": type(error).__name__},
        )

    return AppError(
        code=ErrorCode.UNKNOWN_ERROR,
        message="An unknown error occurred",
        details={"error": repr(error)},
    )
