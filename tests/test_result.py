import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import DataAccessException, NotFoundException
from app.core.result import AppError, Err, ErrorCode, Ok, failure, to_app_error


def test_ok_unwraps_value():
    assert Ok(5).unwrap() == 5
    assert Ok(5).map(lambda v: v * 2).unwrap() == 10


def test_err_unwrap_raises_mapped_exception():
    with pytest.raises(NotFoundException) as exc_info:
        failure(ErrorCode.NOT_FOUND, "Tenant not found").unwrap()

    assert str(exc_info.value) == "Tenant not found"
    assert exc_info.value.code == "NOT_FOUND"


def test_err_unwrap_or_default():
    assert failure(ErrorCode.DATABASE_ERROR, "down").unwrap_or([]) == []


def test_sqlalchemy_error_becomes_database_error():
    error = to_app_error(OperationalError("SELECT 1", {}, Exception("server closed the connection")))

    assert error.code == ErrorCode.DATABASE_ERROR
    assert error.message == "server closed the connection"
    with pytest.raises(DataAccessException):
        Err(error).unwrap()


def test_generic_exception_becomes_internal_error():
    error = to_app_error(RuntimeError("boom"))

    assert error == AppError(
        code=ErrorCode.INTERNAL_ERROR,
        message="boom",
        details={"original_error": "RuntimeError"},
    )
