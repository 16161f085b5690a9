from enum import StrEnum


class Defaults:
    """Default values used when the environment does not override them."""

    SHORTCODE_LENGTH = 6  # 62**6 ~= 56.8 billion shortcodes
    MAX_SAVE_ATTEMPTS = 5  # Collisions tolerated by ShortLinkStore.save()
    FILE_PATH = 'shortlinks.tsv'
    DB_TABLE = 'short_links'
    DB_TIMEOUT_SECONDS = 5.0
    REDIS_TIMEOUT_SECONDS = 5.0
    LOG_LEVEL = 'INFO'
    LOG_FORMAT = 'json'


class Backend(StrEnum):
    """Names of the interchangeable persistence backends."""

    MEMORY = 'memory'
    FILE = 'file'
    SQL = 'sql'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class Store(StrEnum):
        BACKEND = 'SHORTLINKS_BACKEND'
        SHORTCODE_LENGTH = 'SHORTCODE_LENGTH'
        MAX_ATTEMPTS = 'SHORTLINKS_MAX_ATTEMPTS'

    class File(StrEnum):
        PATH = 'SHORTLINKS_FILE_PATH'
        FSYNC = 'SHORTLINKS_FILE_FSYNC'

    class Database(StrEnum):
        URL = 'DATABASE_URL'
        # Connection pieces used when DATABASE_URL is not set
        HOST = 'DB_HOST'
        PORT = 'DB_PORT'
        USER = 'DB_USER'
        PASSWORD = 'DB_PASSWORD'  # noqa: S105
        NAME = 'DB_NAME'
        SSLMODE = 'DB_SSLMODE'
        TABLE = 'SHORTLINKS_DB_TABLE'
        TIMEOUT = 'SHORTLINKS_DB_TIMEOUT'
        CREATE_TABLE = 'SHORTLINKS_DB_CREATE_TABLE'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        PREFIX = 'SHORTLINKS_REDIS_PREFIX'
        TIMEOUT = 'SHORTLINKS_REDIS_TIMEOUT'

    class Logging(StrEnum):
        LEVEL = 'LOG_LEVEL'
        FORMAT = 'LOG_FORMAT'


# Default PostgreSQL connection pieces (used when DATABASE_URL is not set)
DEFAULT_DB_HOST = 'localhost'
DEFAULT_DB_PORT = 5432
DEFAULT_DB_USER = 'shortener_user'
DEFAULT_DB_NAME = 'url_shortener_db'
DEFAULT_DB_SSLMODE = 'disable'
DEFAULT_DB_DRIVER = 'postgresql+psycopg'
