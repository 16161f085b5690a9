"""Utility functions for application configuration management.

Configuration is read from the process environment. A `.env` file in the
current working directory (or the path given to `load_config()`) is loaded
first with python-dotenv; variables already set in the environment win.

The configuration dictionary follows this structure:

    {
        "active_backend": "file",
        "file": {"path": "shortlinks.tsv", "fsync": false},
        "store": {"shortcode_length": 6, "max_attempts": 5}
    }

Only the section of the active backend is present. The sections are passed
as keyword arguments to the matching DAO constructor (see shortlinks.factory).

Functions:
    load_config(dotenv_path=None) -> StoreConfiguration
        Load the store configuration from the environment.

Example:
    >>> os.environ['SHORTLINKS_BACKEND'] = 'sql'
    >>> os.environ['DATABASE_URL'] = 'sqlite:///links.db'
    >>> config = load_config()
    >>> config['active_backend']
    'sql'
    >>> config['sql']['database_url']
    'sqlite:///links.db'
"""

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from shortlinks.types import BackendConfiguration, StoreConfiguration
from shortlinks.constants import ENV, Backend, Defaults
from shortlinks.exceptions import BadConfigurationError
from shortlinks.utils.helpers import env_bool, env_float, env_int, env_str, database_url_from_env


logger = logging.getLogger(__name__)


def _backend_config(backend: Backend) -> BackendConfiguration:
    match backend:
        case Backend.MEMORY:
            return {}
        case Backend.FILE:
            return {
                'path': env_str(ENV.File.PATH, Defaults.FILE_PATH),
                'fsync': env_bool(ENV.File.FSYNC, False),
            }
        case Backend.SQL:
            return {
                'database_url': database_url_from_env(),
                'table_name': env_str(ENV.Database.TABLE, Defaults.DB_TABLE),
                'timeout': env_float(ENV.Database.TIMEOUT, Defaults.DB_TIMEOUT_SECONDS),
                'create_table': env_bool(ENV.Database.CREATE_TABLE, True),
            }
        case Backend.REDIS:
            return {
                'redis_host': env_str(ENV.Redis.HOST, 'localhost'),
                'redis_port': env_int(ENV.Redis.PORT, 6379, minimum=1),
                'redis_db': env_int(ENV.Redis.DB, 0, minimum=0),
                'redis_username': env_str(ENV.Redis.USERNAME),
                'redis_password': env_str(ENV.Redis.PASSWORD),
                'redis_timeout': env_float(ENV.Redis.TIMEOUT, Defaults.REDIS_TIMEOUT_SECONDS),
                'prefix': env_str(ENV.Redis.PREFIX),
            }


def load_config(dotenv_path: str | Path | None = None, backend: str | None = None) -> StoreConfiguration:
    """Load the store configuration from the environment.

    Args:
        dotenv_path (str | Path | None):
            Optional path of a .env file. Defaults to searching for `.env`
            from the current working directory.

        backend (str | None):
            Backend name overriding $SHORTLINKS_BACKEND.

    Returns:
        StoreConfiguration: the configuration dictionary described above.

    Raises:
        BadConfigurationError:
            If a variable holds an invalid value (e.g. unknown backend name).
    """
    load_dotenv(dotenv_path=dotenv_path or find_dotenv(usecwd=True), override=False)

    name = (backend or env_str(ENV.Store.BACKEND, Backend.FILE)).lower()
    try:
        active = Backend(name)
    except ValueError as e:
        choices = ', '.join(repr(b.value) for b in Backend)
        raise BadConfigurationError(f'{ENV.Store.BACKEND} must be one of {choices} (given value: {name!r}).') from e

    config = {
        'active_backend': active.value,
        active.value: _backend_config(active),
        'store': {
            'shortcode_length': env_int(ENV.Store.SHORTCODE_LENGTH, Defaults.SHORTCODE_LENGTH, minimum=1),
            'max_attempts': env_int(ENV.Store.MAX_ATTEMPTS, Defaults.MAX_SAVE_ATTEMPTS, minimum=1),
        },
    }
    logger.debug('Loaded configuration from environment.', extra={'backend': active.value})
    return config
