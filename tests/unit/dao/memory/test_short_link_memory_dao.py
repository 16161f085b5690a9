"""Unit tests for the ShortLinkMemoryDAO

Test coverage includes:

1. Insertion behavior
   - Ensures inserted links are retrievable and insert returns the DAO.
   - Ensures invalid types raise BeartypeCallHintParamViolation.
   - Confirms duplicate shortcodes raise ShortLinkAlreadyExistsError and keep the first link.

2. Retrieval behavior
   - Confirms missing shortcodes raise ShortLinkNotFoundError.

3. Concurrency
   - Ensures exactly one of many racing inserts of one shortcode wins.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from shortlinks.models import ShortLinkModel
from shortlinks.dao.memory import ShortLinkMemoryDAO
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


@pytest.fixture
def dao():
    _dao = ShortLinkMemoryDAO()
    assert _dao.initialize() == 0
    return _dao


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_insert_and_lookup(dao):
    """Ensure an inserted link can be looked up by shortcode."""
    short_link = ShortLinkModel(target='https://example.com/test', shortcode='abc123')

    assert dao.insert_if_absent(short_link) is dao
    assert dao.lookup('abc123') == short_link
    assert dao.count() == 1


def test_insert_with_invalid_type(dao):
    """Ensure inserting a non-model raises a beartype violation."""
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.insert_if_absent('https://example.com/notamodel')


def test_insert_duplicate_keeps_first_link(dao):
    """Ensure a taken shortcode is rejected and the original target kept."""
    dao.insert_if_absent(ShortLinkModel(target='https://example.com/first', shortcode='abc123'))

    with pytest.raises(ShortLinkAlreadyExistsError, match='abc123'):
        dao.insert_if_absent(ShortLinkModel(target='https://example.com/second', shortcode='abc123'))

    assert dao.lookup('abc123').target == 'https://example.com/first'
    assert dao.count() == 1


def test_repr(dao):
    assert repr(dao) == '<ShortLinkMemoryDAO>'


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_lookup_missing_shortcode(dao):
    """Ensure an unknown shortcode raises ShortLinkNotFoundError."""
    with pytest.raises(ShortLinkNotFoundError, match='zzzzzz'):
        dao.lookup('zzzzzz')


def test_lookup_with_invalid_type(dao):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.lookup(123)


# -------------------------------
# 3. Concurrency
# -------------------------------


def test_racing_inserts_of_same_shortcode(dao):
    """Ensure exactly one racing insert wins and the rest observe a collision."""
    workers = 16
    barrier = threading.Barrier(workers)

    def insert(i):
        barrier.wait()
        try:
            dao.insert_if_absent(ShortLinkModel(target=f'https://example.com/{i}', shortcode='abc123'))
        except ShortLinkAlreadyExistsError:
            return None
        return i

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(insert, range(workers)))

    winners = [i for i in results if i is not None]
    assert len(winners) == 1
    assert dao.lookup('abc123').target == f'https://example.com/{winners[0]}'
