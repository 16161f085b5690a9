"""Unit tests for ReadWriteLock in locks.py

Test coverage includes:

1. Shared access
   - Ensures several readers can hold the lock at once.

2. Exclusive access
   - Ensures a writer excludes readers and other writers.
   - Ensures a waiting writer blocks newly arriving readers.

3. Misuse
   - Confirms releasing an unheld lock raises RuntimeError.
"""

import threading
import time

import pytest

from shortlinks.utils.locks import ReadWriteLock


TIMEOUT = 5


@pytest.fixture
def lock():
    return ReadWriteLock()


# -------------------------------
# 1. Shared access
# -------------------------------

def test_readers_share_the_lock(lock):
    """Ensure a second reader enters while the first still holds the lock."""
    entered = threading.Event()

    def reader():
        with lock.read():
            entered.set()

    with lock.read():
        thread = threading.Thread(target=reader)
        thread.start()
        assert entered.wait(TIMEOUT)
    thread.join(TIMEOUT)


# -------------------------------
# 2. Exclusive access
# -------------------------------

def test_writer_excludes_readers(lock):
    entered = threading.Event()

    def reader():
        with lock.read():
            entered.set()

    with lock.write():
        thread = threading.Thread(target=reader)
        thread.start()
        assert not entered.wait(0.2)

    assert entered.wait(TIMEOUT)
    thread.join(TIMEOUT)


def test_writer_waits_for_readers(lock):
    entered = threading.Event()

    def writer():
        with lock.write():
            entered.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()
    assert not entered.wait(0.2)

    lock.release_read()
    assert entered.wait(TIMEOUT)
    thread.join(TIMEOUT)


def test_waiting_writer_blocks_new_readers(lock):
    """Ensure readers arriving after a waiting writer queue behind it."""
    order = []
    writer_waiting = threading.Event()

    def writer():
        writer_waiting.set()
        with lock.write():
            order.append('writer')

    def reader():
        with lock.read():
            order.append('reader')

    lock.acquire_read()
    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    writer_waiting.wait(TIMEOUT)
    # Give the writer time to register itself as waiting
    while not lock._waiting_writers:
        time.sleep(0.01)

    reader_thread = threading.Thread(target=reader)
    reader_thread.start()
    time.sleep(0.1)
    assert order == []

    lock.release_read()
    writer_thread.join(TIMEOUT)
    reader_thread.join(TIMEOUT)
    assert order == ['writer', 'reader']


# -------------------------------
# 3. Misuse
# -------------------------------

def test_release_unheld_read_lock(lock):
    with pytest.raises(RuntimeError):
        lock.release_read()


def test_release_unheld_write_lock(lock):
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_released_after_exception(lock):
    with pytest.raises(KeyError):
        with lock.write():
            raise KeyError('boom')

    with lock.write():
        pass
