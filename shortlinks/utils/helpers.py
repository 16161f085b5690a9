"""Helper utilities for reading typed settings from the environment.

Functions:
    env_str(name, default) -> str | None
        Read a string variable; blank values count as unset
    env_int(name, default, minimum=None) -> int
        Read an integer variable, optionally enforcing a lower bound
    env_float(name, default) -> float
        Read a positive float variable (e.g. timeouts in seconds)
    env_bool(name, default) -> bool
        Read a boolean flag ('1', 'true', 'yes', 'on' / '0', 'false', 'no', 'off')
    database_url_from_env() -> str
        Build the SQLAlchemy database URL from DATABASE_URL or the DB_* variables

Example:
    >>> os.environ['SHORTCODE_LENGTH'] = '8'
    >>> env_int('SHORTCODE_LENGTH', 6, minimum=1)
    8
    >>> os.environ['SHORTLINKS_FILE_FSYNC'] = 'yes'
    >>> env_bool('SHORTLINKS_FILE_FSYNC', False)
    True
"""

import os

from sqlalchemy.engine import URL

from shortlinks.constants import (
    ENV,
    DEFAULT_DB_DRIVER,
    DEFAULT_DB_HOST,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PORT,
    DEFAULT_DB_SSLMODE,
    DEFAULT_DB_USER,
)
from shortlinks.exceptions import BadConfigurationError


TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
FALSY = frozenset({'0', 'false', 'no', 'off'})


def env_str(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name, '').strip()
    return value or default


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    """Read an integer environment variable.

    Raises:
        BadConfigurationError:
            If the value is not an integer or is below `minimum`.
    """
    raw = env_str(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'{name} must be an integer (given value: {raw!r}).') from e
    if minimum is not None and value < minimum:
        raise BadConfigurationError(f'{name} must be >= {minimum} (given value: {value}).')
    return value


def env_float(name: str, default: float) -> float:
    """Read a positive float environment variable.

    Raises:
        BadConfigurationError:
            If the value is not a number or is not positive.
    """
    raw = env_str(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise BadConfigurationError(f'{name} must be a number (given value: {raw!r}).') from e
    if value <= 0:
        raise BadConfigurationError(f'{name} must be positive (given value: {value}).')
    return value


def env_bool(name: str, default: bool) -> bool:
    raw = env_str(name)
    if raw is None:
        return default
    if raw.lower() in TRUTHY:
        return True
    if raw.lower() in FALSY:
        return False
    raise BadConfigurationError(f'{name} must be a boolean flag (given value: {raw!r}).')


def database_url_from_env() -> str:
    """Build the database URL for the SQL backend.

    DATABASE_URL wins when it is set. Otherwise a PostgreSQL URL is assembled
    from DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME and DB_SSLMODE.

    Returns:
        str: SQLAlchemy database URL (the password is rendered in clear).

    Example:
        >>> os.environ['DB_HOST'] = 'db.internal'
        >>> database_url_from_env()
        'postgresql+psycopg://shortener_user@db.internal:5432/url_shortener_db?sslmode=disable'
    """
    url = env_str(ENV.Database.URL)
    if url is not None:
        return url

    return URL.create(
        DEFAULT_DB_DRIVER,
        username=env_str(ENV.Database.USER, DEFAULT_DB_USER),
        password=env_str(ENV.Database.PASSWORD),
        host=env_str(ENV.Database.HOST, DEFAULT_DB_HOST),
        port=env_int(ENV.Database.PORT, DEFAULT_DB_PORT, minimum=1),
        database=env_str(ENV.Database.NAME, DEFAULT_DB_NAME),
        query={'sslmode': env_str(ENV.Database.SSLMODE, DEFAULT_DB_SSLMODE)},
    ).render_as_string(hide_password=False)
