"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a shortcode has no record in the data store.

    ShortLinkAlreadyExistsError:
        Raised when inserting a shortcode that is already taken (a collision).

    DataStoreError:
        Raised when the data store cannot durably record or retrieve data
        (I/O errors, connection issues, timeouts, unexpected constraint errors, etc.).

Example:
    >>> from shortlinks.dao.exceptions import ShortLinkNotFoundError
    >>> raise ShortLinkNotFoundError("Short link with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    shortlinks.dao.exceptions.ShortLinkNotFoundError: Short link with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a shortcode is not found in the data store."""

    pass


class ShortLinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a shortcode that already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. I/O errors, connection issues, timeouts, etc.
    """

    pass
