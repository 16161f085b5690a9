"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying storage mechanism (memory, append-only file, SQL table, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortLinkModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent lifecycle: construct -> initialize -> operate -> close.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinks.models import ShortLinkModel
        >>> from shortlinks.dao.file import ShortLinkFileDAO

        >>> dao = ShortLinkFileDAO(path='links.tsv')
        >>> dao.initialize()
        0

        >>> short_link = ShortLinkModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c3",
        ... )
        >>> dao.insert_if_absent(short_link)
        <ShortLinkFileDAO>

        >>> retrieved = dao.lookup("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.close()
"""

from abc import ABC, abstractmethod

from shortlinks.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        initialize() -> int:
            Prepare the data store (open files, create tables, ping servers).
            Returns the number of links restored into memory (0 if none).
            Raises DataStoreError if the data store can't be prepared.

        insert_if_absent(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Insert a new ShortLinkModel into the data store, atomically with
            respect to other calls on the same DAO instance.
            Raises ShortLinkAlreadyExistsError if the shortcode already exists.
            Raises DataStoreError on connection or write failure.

        lookup(shortcode: str, **kwargs) -> ShortLinkModel:
            Retrieve a ShortLinkModel from the data store by shortcode.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        close() -> None:
            Release files, connections and other handles held by the DAO.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkFileDAO or
        ShortLinkSQLDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Links are never updated or deleted. The DAO does not provide an
          interface to modify existing entries.
    """

    def initialize(self) -> int:
        """Prepare the data store before use.

        Stateless data stores have nothing to restore, so the default is a no-op.

        Returns:
            int: Number of links restored into memory.

        Raises:
            DataStoreError:
                If the data store can't be prepared.
        """
        return 0

    @abstractmethod
    def insert_if_absent(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel into the data store.

        If two callers race on the same shortcode, exactly one of them succeeds and
        the other one observes ShortLinkAlreadyExistsError.

        Args:
            short_link (ShortLinkModel):
                The ShortLinkModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a ShortLinkModel with the same shortcode already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def lookup(self, shortcode: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortLinkModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The stored ShortLinkModel instance.

        Raises:
            ShortLinkNotFoundError:
                If no ShortLinkModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def close(self) -> None:
        """Release resources held by the DAO. No-op by default."""
        return None

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
