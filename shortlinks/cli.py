#!/usr/bin/env python3
"""
Shorten URLs and resolve shortcodes from the command line.

The backend is configured through the environment (see shortlinks.utils.config)
and can be overridden per invocation.

CLI usage:
    # Shorten one or more URLs (prints "<shortcode>\\t<url>" per URL)
    $ shortlinks shorten https://example.com/blog/article-123 https://example.com/about

    # Resolve a shortcode (prints the target URL)
    $ shortlinks resolve a1B2c3

    # Use a specific log file or database for this invocation
    $ shortlinks --backend file --file-path /var/lib/shortlinks/links.tsv shorten https://example.com
    $ shortlinks --backend sql --database-url sqlite:///links.db resolve a1B2c3

Exit codes:
    0: success
    1: shortcode not found
    2: service failure (bad configuration, data store failure, no free shortcode)
"""

from __future__ import annotations

import os
import sys
import argparse
import logging

from shortlinks.constants import ENV, Backend
from shortlinks.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from shortlinks.exceptions import ConfigurationError, GenerationExhaustedError
from shortlinks.factory import create_store
from shortlinks.types import StoreConfiguration
from shortlinks.utils.config import load_config
from shortlinks.utils.logging import initialize_logging


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shortlinks',
        description='Shorten URLs and resolve shortcodes.',
    )
    parser.add_argument('--backend', choices=[b.value for b in Backend], help='Override $SHORTLINKS_BACKEND')
    parser.add_argument('--file-path', help='Override $SHORTLINKS_FILE_PATH (file backend)')
    parser.add_argument('--database-url', help='Override $DATABASE_URL (sql backend)')
    parser.add_argument('--log-level', default=None, help='Override $LOG_LEVEL (default: WARNING for the CLI)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    shorten = subparsers.add_parser('shorten', help='Store one or more URLs under new shortcodes')
    shorten.add_argument('urls', nargs='+', metavar='URL')

    resolve = subparsers.add_parser('resolve', help='Print the URL stored under a shortcode')
    resolve.add_argument('shortcode')

    return parser


def _apply_overrides(config: StoreConfiguration, args: argparse.Namespace) -> StoreConfiguration:
    backend = config['active_backend']
    if args.file_path and backend == Backend.FILE:
        config[backend]['path'] = args.file_path
    if args.database_url and backend == Backend.SQL:
        config[backend]['database_url'] = args.database_url
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _apply_overrides(load_config(backend=args.backend), args)
        initialize_logging(level=args.log_level or os.environ.get(ENV.Logging.LEVEL, 'WARNING'), stream='ext://sys.stderr')
        store = create_store(config)
        with store:
            if args.command == 'shorten':
                for url in args.urls:
                    print(f'{store.save(url)}\t{url}')
            else:
                print(store.resolve(args.shortcode))
    except ShortLinkNotFoundError as e:
        print(e, file=sys.stderr)
        return EXIT_NOT_FOUND
    except (ConfigurationError, DataStoreError, GenerationExhaustedError) as e:
        logger.debug('Command failed.', exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
