"""Shared plumbing for repositories."""

import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from app.core.result import Ok, Err, to_app_error

logger = logging.getLogger(__name__)


def returns_result(method):
    """
    Wrap a repository method so it returns a Result.

    The method's return value becomes Ok(value). A SQLAlchemyError rolls the
    session back and becomes Err(DATABASE_ERROR).
    """

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return Ok(method(self, *args, **kwargs))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(
                "Database error in %s.%s: %s",
                type(self).__name__,
                method.__name__,
                e,
            )
            return Err(to_app_error(e))

    return wrapper
