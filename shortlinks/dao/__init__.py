from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.memory import ShortLinkMemoryDAO
from shortlinks.dao.file import ShortLinkFileDAO
from shortlinks.dao.sql import ShortLinkSQLDAO
from shortlinks.dao.redis import ShortLinkRedisDAO


__all__ = [
    'ShortLinkBaseDAO',
    'ShortLinkMemoryDAO',
    'ShortLinkFileDAO',
    'ShortLinkSQLDAO',
    'ShortLinkRedisDAO',
]
