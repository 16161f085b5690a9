"""Data Access Object (DAO) implementation for managing short links in Redis

This module provides a Redis-based implementation of ShortLinkBaseDAO. Redis
executes `SET ... NX` atomically, so Redis itself is the serialization point
for concurrent inserts of the same shortcode.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> dao = ShortLinkRedisDAO(prefix="shortlinks:dev")
    >>> dao.initialize()
    0
    >>> dao.insert_if_absent(ShortLinkModel(target="https://example.com/page", shortcode="abc123"))
    <ShortLinkRedisDAO>
    >>> dao.lookup("abc123").target
    'https://example.com/page'
"""

from beartype import beartype

from shortlinks.models import ShortLinkModel
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.redis.mixins import RedisClientMixin
from shortlinks.dao.redis.helpers import handle_redis_connection_error
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        initialize() -> int:
            PING Redis. Returns 0 (nothing is restored into process memory).
            Raises DataStoreError on connectivity issues with Redis.

        insert_if_absent(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            SET the short link key only if it doesn't exist yet.
            Raises ShortLinkAlreadyExistsError when the shortcode is taken.
            Raises DataStoreError on connectivity issues with Redis.

        lookup(shortcode: str, **kwargs) -> ShortLinkModel:
            GET the target for a shortcode.
            Raises ShortLinkNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.

        close() -> None:
            Close the Redis client (only if this DAO created it).
    """

    @handle_redis_connection_error
    def initialize(self) -> int:
        self._healthcheck()
        return 0

    @handle_redis_connection_error
    @beartype
    def insert_if_absent(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Insert a short link mapping into Redis

        NOTE: EXISTS followed by SET would race between two clients:

              (client 1): EXISTS <app>:links:abc123:url => 0
              (client 2): EXISTS <app>:links:abc123:url => 0
              (client 1): SET <app>:links:abc123:url <url 1>
              (client 2): SET <app>:links:abc123:url <url 2>   => client 1's link is lost

              SET NX performs the check and the write as one atomic command.

        Raises:
            ShortLinkAlreadyExistsError:
                If a short link with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        link_url_key = self.keys.link_url_key(short_link.shortcode)
        if not self.redis.set(link_url_key, short_link.target, nx=True):
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def lookup(self, shortcode: str, **kwargs) -> ShortLinkModel:
        target = self.redis.get(self.keys.link_url_key(shortcode))
        if target is None:
            raise ShortLinkNotFoundError(f"Short link with code '{shortcode}' not found.")
        if isinstance(target, bytes):
            target = target.decode('utf-8')
        return ShortLinkModel(target=target, shortcode=shortcode)

    def close(self) -> None:
        if self._owns_client:
            self.redis.close()
