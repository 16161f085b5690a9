"""Data Access Object (DAO) implementation persisting short links to an append-only log

This module extends the in-memory DAO with durability: every inserted link is
appended to a tab-separated log file, and the log is replayed into memory when
the DAO is initialized.

Responsibilities:
    - Replay the log into the in-memory index on startup;
    - Append each new link to the log before reporting success;
    - Roll back the in-memory entry if the append fails;
    - Never compact or rewrite the log in place.

Classes:
    ShortLinkFileDAO:
        DAO for storing ShortLinkModel records in an append-only log file.

Log format:
    One UTF-8 record per line, `<shortcode>\\t<target>\\n`, no header.

Example:
    >>> dao = ShortLinkFileDAO(path='shortlinks.tsv')
    >>> dao.initialize()
    3
    >>> dao.insert_if_absent(ShortLinkModel(target='https://example.com', shortcode='abc123'))
    <ShortLinkFileDAO>
    >>> dao.close()
"""


import io
import os
import logging
from pathlib import Path

from beartype import beartype

from shortlinks.models import ShortLinkModel
from shortlinks.dao.memory import ShortLinkMemoryDAO
from shortlinks.dao.exceptions import DataStoreError
from shortlinks.dao.file.records import TERMINATOR, encode_record, decode_record


logger = logging.getLogger(__name__)


class ShortLinkFileDAO(ShortLinkMemoryDAO):
    """Append-only log Data Access Object (DAO) for short link mappings

    Attributes:
        path (Path):
            Location of the log file.
        fsync (bool):
            If True, fsync the log after every append (slower, survives power loss).
        encoding (str):
            Text encoding of the log records. Defaults to 'utf-8'.

    Methods:
        initialize() -> int:
            Open (creating if absent) and replay the log. Returns the number of indexed links.
            Raises DataStoreError if the log can't be opened or read.

        insert_if_absent(short_link: ShortLinkModel, **kwargs) -> ShortLinkFileDAO:
            Index the link and append it to the log.
            Raises ShortLinkAlreadyExistsError when the shortcode is taken.
            Raises DataStoreError when the link can't be appended (the index is rolled back).

        lookup(shortcode: str, **kwargs) -> ShortLinkModel:
            Served from the in-memory index (see ShortLinkMemoryDAO).

        close() -> None:
            Close the append handle.
    """

    def __init__(self, path: str | os.PathLike, fsync: bool = False, encoding: str = 'utf-8'):
        super().__init__()
        self.path = Path(path)
        self.fsync = fsync
        self.encoding = encoding
        self._log: io.RawIOBase | None = None

    def initialize(self) -> int:
        """Open the log (creating it if absent) and replay it into memory

        Duplicate shortcodes are resolved last-write-wins. Empty lines are ignored
        and malformed lines are skipped with a warning. A final record without its
        terminator is a torn write; it is skipped and truncated away.

        Returns:
            int: number of links in the in-memory index after replay.

        Raises:
            DataStoreError:
                If the log can't be created, opened or read.
        """
        with self._lock.write():
            self._close_locked()
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                # NOTE: The append handle is unbuffered. A record that failed to
                #       reach the file can't linger in a buffer and be flushed
                #       later by an unrelated append.
                log = open(self.path, 'ab', buffering=0)
            except OSError as e:
                raise DataStoreError(f"Can't open short link log at '{self.path}'.") from e

            try:
                links, end = self._replay()
            except (OSError, UnicodeDecodeError) as e:
                log.close()
                raise DataStoreError(f"Can't read short link log at '{self.path}'.") from e

            try:
                if log.seek(0, os.SEEK_END) > end:
                    log.truncate(end)
            except OSError as e:
                log.close()
                raise DataStoreError(f"Can't drop torn record from short link log at '{self.path}'.") from e

            self._links = links
            self._log = log
            restored = len(links)

        logger.info('Replayed short link log.', extra={'path': str(self.path), 'restored': restored})
        return restored

    @beartype
    def insert_if_absent(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkFileDAO':
        """Insert a short link mapping and append it to the log

        NOTE: The append happens while still holding the write lock, and the in-memory
              entry is removed again if the append fails. No other caller can observe
              a link that is indexed but not yet durable.

        Raises:
            ShortLinkAlreadyExistsError:
                If the shortcode is already taken.
            DataStoreError:
                If the log is not open, the link can't be encoded, or the append fails.
        """
        try:
            record = encode_record(short_link, self.encoding)
        except ValueError as e:
            raise DataStoreError(f"Can't store short link '{short_link.shortcode}' in the log.") from e

        with self._lock.write():
            if self._log is None or self._log.closed:
                raise DataStoreError(f"Short link log at '{self.path}' is not open (call initialize() first).")

            self._insert_locked(short_link)
            try:
                self._append_locked(record)
            except (OSError, ValueError) as e:
                del self._links[short_link.shortcode]
                raise DataStoreError(f"Can't append short link '{short_link.shortcode}' to '{self.path}'.") from e

        return self

    def close(self) -> None:
        with self._lock.write():
            self._close_locked()

    def _replay(self) -> tuple[dict[str, str], int]:
        # Returns the index and the offset just past the last complete record
        links: dict[str, str] = {}
        end = 0
        with open(self.path, 'rb') as log:
            for lineno, raw in enumerate(log, start=1):
                if not raw.endswith(TERMINATOR.encode()):
                    logger.warning('Dropping torn record at end of short link log.', extra={'path': str(self.path), 'line_number': lineno})
                    break
                end += len(raw)
                line = raw.decode(self.encoding)
                if not line.strip(TERMINATOR):
                    continue
                short_link = decode_record(line)
                if short_link is None:
                    logger.warning('Skipping malformed line in short link log.', extra={'path': str(self.path), 'line_number': lineno})
                    continue
                links[short_link.shortcode] = short_link.target
        return links, end

    def _append_locked(self, record: bytes) -> None:
        # Caller must hold the write lock
        offset = self._log.seek(0, os.SEEK_END)
        try:
            view = memoryview(record)
            while view:
                written = self._log.write(view)
                view = view[written:]
            if self.fsync:
                os.fsync(self._log.fileno())
        except (OSError, ValueError):
            self._truncate_locked(offset)
            raise

    def _truncate_locked(self, offset: int) -> None:
        # Drop a partially written record so the next append starts on a fresh line.
        # If that fails the log is closed: appending after torn bytes would glue the
        # next record onto them. initialize() drops the torn tail and reopens.
        try:
            self._log.truncate(offset)
        except (OSError, ValueError):
            logger.warning('Could not truncate partial record from short link log.', extra={'path': str(self.path), 'offset': offset})
            self._close_locked()

    def _close_locked(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None
