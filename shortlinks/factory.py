"""Build DAOs and stores from configuration

The active backend is selected once, here, from the configuration dictionary
returned by `shortlinks.utils.config.load_config()`.

Functions:
    create_dao(config) -> ShortLinkBaseDAO
        Instantiate the DAO of the active backend.
    create_store(config=None) -> ShortLinkStore
        Instantiate a (not yet initialized) store around the active backend.

Example:
    >>> with create_store() as store:
    ...     shortcode = store.save('https://example.com')
    ...     store.resolve(shortcode)
    'https://example.com'
"""

from sqlalchemy.exc import ArgumentError

from shortlinks.types import StoreConfiguration
from shortlinks.constants import Backend, Defaults
from shortlinks.dao import ShortLinkBaseDAO, ShortLinkMemoryDAO, ShortLinkFileDAO, ShortLinkSQLDAO, ShortLinkRedisDAO
from shortlinks.exceptions import BadConfigurationError
from shortlinks.store import ShortLinkStore
from shortlinks.utils.config import load_config
from shortlinks.utils.shortener import ShortcodeGenerator


DAO_CLASSES: dict[Backend, type[ShortLinkBaseDAO]] = {
    Backend.MEMORY: ShortLinkMemoryDAO,
    Backend.FILE: ShortLinkFileDAO,
    Backend.SQL: ShortLinkSQLDAO,
    Backend.REDIS: ShortLinkRedisDAO,
}


def create_dao(config: StoreConfiguration) -> ShortLinkBaseDAO:
    """Instantiate the DAO of the configured active backend.

    Args:
        config (StoreConfiguration):
            Configuration with an 'active_backend' name and a section of DAO
            keyword arguments under that name.

    Returns:
        ShortLinkBaseDAO: an uninitialized DAO.

    Raises:
        BadConfigurationError:
            If the backend is unknown or its options are rejected by the DAO.
    """
    name = config.get('active_backend')
    try:
        backend = Backend(name)
    except ValueError as e:
        raise BadConfigurationError(f'Unknown backend {name!r}.') from e

    options = config.get(backend.value, {})
    try:
        return DAO_CLASSES[backend](**options)
    except (TypeError, ValueError, ImportError, ArgumentError) as e:
        raise BadConfigurationError(f'Invalid options for {backend.value!r} backend: {e}') from e


def create_store(config: StoreConfiguration | None = None) -> ShortLinkStore:
    """Instantiate a store for the configured backend.

    The store is returned uninitialized: call `initialize()` or use it as a
    context manager.

    Args:
        config (StoreConfiguration | None):
            Configuration dictionary. Loaded from the environment when None.
    """
    if config is None:
        config = load_config()

    settings = config.get('store', {})
    generator = ShortcodeGenerator(length=settings.get('shortcode_length', Defaults.SHORTCODE_LENGTH))
    return ShortLinkStore(
        dao=create_dao(config),
        generator=generator,
        max_attempts=settings.get('max_attempts', Defaults.MAX_SAVE_ATTEMPTS),
    )
