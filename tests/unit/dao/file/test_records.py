"""Unit tests for the short link log record codec in records.py"""

import pytest

from shortlinks.models import ShortLinkModel
from shortlinks.dao.file.records import encode_record, decode_record


def test_encode_record():
    short_link = ShortLinkModel(target='https://example.com/a?b=c', shortcode='abc123')
    assert encode_record(short_link) == b'abc123\thttps://example.com/a?b=c\n'


def test_target_with_tab_survives():
    """Ensure only the first tab separates the shortcode from the target."""
    short_link = ShortLinkModel(target='https://example.com/\tpath', shortcode='abc123')
    assert decode_record(encode_record(short_link).decode()) == short_link


@pytest.mark.parametrize(
    'short_link',
    [
        ShortLinkModel(target='https://example.com', shortcode=''),
        ShortLinkModel(target='https://example.com', shortcode='ab\tc'),
        ShortLinkModel(target='https://example.com', shortcode='ab\nc'),
        ShortLinkModel(target='https://example.com/\nsecond-line', shortcode='abc123'),
        ShortLinkModel(target='https://example.com/\ud800', shortcode='abc123'),
    ],
)
def test_encode_rejects_unrepresentable_links(short_link):
    with pytest.raises(ValueError):
        encode_record(short_link)


@pytest.mark.parametrize(
    'line, expected',
    [
        ('abc123\thttps://example.com\n', ShortLinkModel(target='https://example.com', shortcode='abc123')),
        ('abc123\thttps://example.com', ShortLinkModel(target='https://example.com', shortcode='abc123')),
        ('abc123\t\n', ShortLinkModel(target='', shortcode='abc123')),
        ('no-separator\n', None),
        ('\thttps://example.com\n', None),
    ],
)
def test_decode_record(line, expected):
    assert decode_record(line) == expected
