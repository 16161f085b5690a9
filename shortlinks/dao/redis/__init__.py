from shortlinks.dao.redis.redis_key_schema import RedisKeySchema
from shortlinks.dao.redis.short_link_redis_dao import ShortLinkRedisDAO
from shortlinks.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortLinkRedisDAO',
    'RedisClientMixin',
]
