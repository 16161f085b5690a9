from shortlinks.dao.sql.schema import short_links_table
from shortlinks.dao.sql.mixins import SQLEngineMixin
from shortlinks.dao.sql.short_link_sql_dao import ShortLinkSQLDAO


__all__ = [
    'short_links_table',
    'SQLEngineMixin',
    'ShortLinkSQLDAO',
]
