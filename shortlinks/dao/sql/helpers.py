import functools
from typing import TypeVar, Any
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from shortlinks.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_sqlalchemy_error[F](method: F) -> F:
    """Wrap database-interacting DAO methods to handle SQLAlchemy errors

    Args:
        method (Callable[..., Any]):
            DAO method performing database operations which may raise sqlalchemy.exc.SQLAlchemyError
            or a UnicodeError raised by the driver while binding parameters.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any database or parameter encoding error.

    Example:
        >>> @handle_sqlalchemy_error
        ... def ping(self):
        ...     with self.engine.connect() as conn:
        ...         conn.execute(text('SELECT 1'))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (SQLAlchemyError, UnicodeError) as e:
            url = self.engine.url.render_as_string(hide_password=True)
            raise DataStoreError(f'Database operation failed at {url}: {type(e).__name__}.') from e

    return wrapper
