"""Data Access Object (DAO) implementation for managing short links in a SQL table

This module provides a SQLAlchemy Core implementation of ShortLinkBaseDAO. The
table's primary key on `short_id` is the serialization point for concurrent
inserts, so no in-process lock is needed.

Responsibilities:
    - Create the short links table on startup (optional);
    - Insert and retrieve short links with point statements;
    - Tell shortcode collisions apart from other integrity errors;
    - Translate database errors into DAO exceptions.

Classes:
    ShortLinkSQLDAO:
        DAO for storing and retrieving ShortLinkModel in a relational database.

Example:
    >>> dao = ShortLinkSQLDAO(database_url='sqlite:///links.db')
    >>> dao.initialize()
    0
    >>> dao.insert_if_absent(ShortLinkModel(target='https://example.com/page', shortcode='abc123'))
    <ShortLinkSQLDAO>
    >>> dao.lookup('abc123').target
    'https://example.com/page'
"""

import logging

from beartype import beartype
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError

from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.sql.mixins import SQLEngineMixin
from shortlinks.dao.sql.helpers import handle_sqlalchemy_error
from shortlinks.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError, ShortLinkNotFoundError


logger = logging.getLogger(__name__)


class ShortLinkSQLDAO(SQLEngineMixin, ShortLinkBaseDAO):
    """SQL-based Data Access Object (DAO) for managing short link mappings

    Attributes (see SQLEngineMixin):
        engine (sqlalchemy.engine.Engine):
            Engine used to talk to the database.
        table (sqlalchemy.Table):
            The short links table.

    Methods:
        initialize() -> int:
            Create the table if configured to, then healthcheck the database. Returns 0.

        insert_if_absent(short_link: ShortLinkModel, **kwargs) -> ShortLinkSQLDAO:
            INSERT a row for the short link.
            Raises ShortLinkAlreadyExistsError when the shortcode is taken.
            Raises DataStoreError on any other database error.

        lookup(shortcode: str, **kwargs) -> ShortLinkModel:
            SELECT the row for a shortcode.
            Raises ShortLinkNotFoundError when no row exists.
            Raises DataStoreError on any other database error.

        close() -> None:
            Dispose of the engine's connection pool (only if this DAO created the engine).
    """

    @handle_sqlalchemy_error
    def initialize(self) -> int:
        if self.create_table:
            self.metadata.create_all(self.engine, tables=[self.table], checkfirst=True)
            logger.debug('Ensured short links table exists.', extra={'table': self.table.name})
        self._healthcheck()
        return 0

    @handle_sqlalchemy_error
    @beartype
    def insert_if_absent(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkSQLDAO':
        """Insert a short link row

        NOTE: Any IntegrityError is double-checked with a point lookup. Only an
              existing row with the same shortcode counts as a collision. Other
              constraint violations (e.g. NOT NULL, value too long) are data store
              failures and must not be retried as collisions.

        Raises:
            ShortLinkAlreadyExistsError:
                If a row with the same shortcode already exists.
            DataStoreError:
                If the insert fails for any other reason.
        """
        statement = insert(self.table).values(short_id=short_link.shortcode, long_url=short_link.target)
        try:
            with self.engine.begin() as conn:
                conn.execute(statement)
        except IntegrityError as e:
            if self._exists(short_link.shortcode):
                raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.shortcode}' already exists.") from e
            raise DataStoreError(f"Integrity error inserting short link '{short_link.shortcode}'.") from e
        return self

    @handle_sqlalchemy_error
    @beartype
    def lookup(self, shortcode: str, **kwargs) -> ShortLinkModel:
        statement = select(self.table.c.long_url).where(self.table.c.short_id == shortcode)
        with self.engine.connect() as conn:
            row = conn.execute(statement).first()

        if row is None:
            raise ShortLinkNotFoundError(f"Short link with code '{shortcode}' not found.")
        return ShortLinkModel(target=row.long_url, shortcode=shortcode)

    def close(self) -> None:
        if self._owns_engine:
            self.engine.dispose()

    def _exists(self, shortcode: str) -> bool:
        statement = select(self.table.c.short_id).where(self.table.c.short_id == shortcode)
        with self.engine.connect() as conn:
            return conn.execute(statement).first() is not None
