class PropertyManagerException(Exception):
    """Base exception for the property manager"""

    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "", code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class UnauthorizedException(PropertyManagerException):
    """Raised when JWT validation fails"""

    code = "UNAUTHORIZED"


class NotFoundException(PropertyManagerException):
    """Raised when resource not found"""

    code = "NOT_FOUND"


class ForbiddenException(PropertyManagerException):
    """Raised when the caller's role does not allow the operation"""

    code = "FORBIDDEN"


class ValidationException(PropertyManagerException):
    """Raised for business logic validation errors"""

    code = "VALIDATION_ERROR"


class DataAccessException(PropertyManagerException):
    """Raised when the database rejects or fails a query"""

    code = "DATABASE_ERROR"
