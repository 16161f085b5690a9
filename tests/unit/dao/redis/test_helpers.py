"""Unit tests for handle_redis_connection_error decorator.

This test suite verifies that the decorator properly handles Redis
failures and preserves the original method's behavior.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Error handling
       - Ensures Redis connection errors and timeouts are converted into DataStoreError.
       - Ensures other Redis errors are converted into DataStoreError.
       - Ensures values the client can't encode are converted into DataStoreError.
    3. Function metadata preservation
       - Confirms functools.wraps preserves the original function's name and docstring.
"""

import pytest
import redis
from unittest.mock import MagicMock

from shortlinks.dao.redis.helpers import handle_redis_connection_error
from shortlinks.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error=None):
        self.error = error
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }

    @handle_redis_connection_error
    def call(self):
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    """Ensure the wrapped function executes normally when no error occurs."""
    assert DummyDAO().call() == 'OK'


# -------------------------------
# 2. Error handling
# -------------------------------


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('Cannot connect'), redis.exceptions.TimeoutError('Timed out')])
def test_decorator_transforms_redis_connection_error(error):
    """Ensure Redis ConnectionError/TimeoutError is caught and re-raised as DataStoreError."""
    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0."):
        DummyDAO(error).call()


def test_decorator_transforms_other_redis_errors():
    """Ensure any other RedisError is reported as a data store failure."""
    with pytest.raises(DataStoreError, match='Redis at localhost:6379/0 failed: ResponseError.'):
        DummyDAO(redis.exceptions.ResponseError('WRONGTYPE')).call()


def test_decorator_transforms_encoding_error():
    error = UnicodeEncodeError('utf-8', '\ud800', 0, 1, 'surrogates not allowed')
    with pytest.raises(DataStoreError, match='Redis at localhost:6379/0 failed: UnicodeEncodeError.'):
        DummyDAO(error).call()


# -------------------------------
# 3. Function metadata preservation
# -------------------------------


def test_decorator_preserves_function_metadata():
    """Ensure function name and docstring are preserved via functools.wraps."""

    @handle_redis_connection_error
    def sample_function():
        """This is a sample docstring."""
        return 'OK'

    assert sample_function.__name__ == 'sample_function'
    assert 'sample docstring' in sample_function.__doc__
