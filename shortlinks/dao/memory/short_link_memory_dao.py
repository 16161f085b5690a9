"""Data Access Object (DAO) implementation keeping short links in process memory

Responsibilities:
    - Insert and retrieve short links from an in-process dictionary;
    - Serialize the existence check and the insert in one critical section;
    - Let lookups run concurrently with each other.

Classes:
    ShortLinkMemoryDAO:
        DAO for storing and retrieving ShortLinkModel in a dict guarded by a
        reader/writer lock. Links live as long as the DAO instance.

Example:
    >>> dao = ShortLinkMemoryDAO()
    >>> dao.insert_if_absent(ShortLinkModel(target='https://example.com', shortcode='abc123'))
    <ShortLinkMemoryDAO>
    >>> dao.lookup('abc123').target
    'https://example.com'
"""

from beartype import beartype

from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from shortlinks.utils.locks import ReadWriteLock


class ShortLinkMemoryDAO(ShortLinkBaseDAO):
    """In-memory Data Access Object (DAO) for short link mappings

    Attributes:
        _links (dict[str, str]):
            shortcode -> target index.
        _lock (ReadWriteLock):
            Guards `_links`. Inserts take the write side, lookups the read side.
    """

    def __init__(self):
        self._links: dict[str, str] = {}
        self._lock = ReadWriteLock()

    @beartype
    def insert_if_absent(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkMemoryDAO':
        """Insert a short link mapping if its shortcode is free

        NOTE: The existence check and the insert run under the exclusive side
              of the lock. Checking under a shared lock would let two writers both
              observe a free shortcode and both insert it:

              (thread 1): check 'abc123' -> free
              (thread 2): check 'abc123' -> free
              (thread 1): insert 'abc123' -> succeeds
              (thread 2): insert 'abc123' -> overwrites thread 1's link

        Raises:
            ShortLinkAlreadyExistsError:
                If the shortcode is already taken.
        """
        with self._lock.write():
            self._insert_locked(short_link)
        return self

    @beartype
    def lookup(self, shortcode: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored short link by shortcode

        Raises:
            ShortLinkNotFoundError:
                If the shortcode doesn't exist.
        """
        with self._lock.read():
            target = self._links.get(shortcode)

        if target is None:
            raise ShortLinkNotFoundError(f"Short link with code '{shortcode}' not found.")
        return ShortLinkModel(target=target, shortcode=shortcode)

    def count(self) -> int:
        """Return the number of stored short links."""
        with self._lock.read():
            return len(self._links)

    def _insert_locked(self, short_link: ShortLinkModel) -> None:
        # Caller must hold the write lock
        if short_link.shortcode in self._links:
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.shortcode}' already exists.")
        self._links[short_link.shortcode] = short_link.target
