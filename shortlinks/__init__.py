from shortlinks.models import ShortLinkModel
from shortlinks.store import ShortLinkStore
from shortlinks.factory import create_dao, create_store


__all__ = [
    'ShortLinkModel',
    'ShortLinkStore',
    'create_dao',
    'create_store',
]
