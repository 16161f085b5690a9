from shortlinks.utils.config import load_config
from shortlinks.utils.helpers import env_str, env_int, env_float, env_bool, database_url_from_env
from shortlinks.utils.shortener import ShortcodeGenerator, is_valid_shortcode
from shortlinks.utils.locks import ReadWriteLock
from shortlinks.utils.logging import initialize_logging


__all__ = [
    'ShortcodeGenerator',
    'is_valid_shortcode',
    'ReadWriteLock',
    'load_config',
    'env_str',
    'env_int',
    'env_float',
    'env_bool',
    'database_url_from_env',
    'initialize_logging',
]
