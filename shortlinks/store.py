"""Short link store: shortcode allocation on top of a persistence backend

The store is the only component that mutates the shortcode -> target mapping.
It owns the retry-on-collision policy and exposes the two operations callers
(HTTP handlers, the CLI, tests) use: `save()` and `resolve()`.

Lifecycle:
    construct -> initialize -> operate (save / resolve) -> close

    The store is also a context manager: entering the block initializes the
    backend and leaving it closes the backend.

Example:
    >>> from shortlinks.dao import ShortLinkFileDAO
    >>> with ShortLinkStore(ShortLinkFileDAO('shortlinks.tsv')) as store:
    ...     shortcode = store.save('https://example.com/blog/article-123')
    ...     store.resolve(shortcode)
    'https://example.com/blog/article-123'
"""

import logging

from shortlinks.models import ShortLinkModel
from shortlinks.constants import Defaults
from shortlinks.dao.base import ShortLinkBaseDAO
from shortlinks.dao.exceptions import ShortLinkAlreadyExistsError
from shortlinks.exceptions import GenerationExhaustedError
from shortlinks.utils.shortener import ShortcodeGenerator


logger = logging.getLogger(__name__)


class ShortLinkStore:
    """Allocate collision-free shortcodes and resolve them back to targets.

    Attributes:
        dao (ShortLinkBaseDAO):
            Persistence backend holding the shortcode -> target mapping.
        generator (ShortcodeGenerator):
            Source of shortcode candidates (private to this store).
        max_attempts (int):
            Number of candidates tried by one save() call before giving up.

    Methods:
        initialize() -> int:
            Prepare the backend. Returns the number of links restored into memory.

        save(target: str) -> str:
            Store `target` under a fresh shortcode and return the shortcode.
            Raises GenerationExhaustedError if every candidate collided.
            Raises DataStoreError if the backend fails (never retried).

        resolve(shortcode: str) -> str:
            Return the target stored under `shortcode`.
            Raises ShortLinkNotFoundError if the shortcode is unknown.
            Raises DataStoreError if the backend fails.

        close() -> None:
            Release the backend's resources.
    """

    def __init__(
        self,
        dao: ShortLinkBaseDAO,
        generator: ShortcodeGenerator | None = None,
        max_attempts: int = Defaults.MAX_SAVE_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.generator = generator or ShortcodeGenerator(length=Defaults.SHORTCODE_LENGTH)
        self.max_attempts = max_attempts

    def initialize(self) -> int:
        restored = self.dao.initialize()
        logger.debug('Initialized short link store.', extra={'dao': type(self.dao).__name__, 'restored': restored})
        return restored

    def save(self, target: str) -> str:
        """Store `target` under a newly allocated shortcode

        Each attempt generates a candidate and asks the backend to insert it if
        absent. A collision is retried with a fresh candidate; a backend failure
        is raised immediately because retrying won't help.

        Args:
            target (str):
                The original long URL. Not validated here.

        Returns:
            str: the shortcode now mapped to `target`.

        Raises:
            GenerationExhaustedError:
                If all `max_attempts` candidates were already taken.
            DataStoreError:
                If the backend could not durably record the link.
        """
        for attempt in range(1, self.max_attempts + 1):
            shortcode = self.generator.generate()
            try:
                self.dao.insert_if_absent(ShortLinkModel(target=target, shortcode=shortcode))
            except ShortLinkAlreadyExistsError:
                logger.debug('Shortcode collision, retrying.', extra={'shortcode': shortcode, 'attempt': attempt})
                continue
            return shortcode

        raise GenerationExhaustedError(self.max_attempts)

    def resolve(self, shortcode: str) -> str:
        """Return the target stored under `shortcode`.

        Raises:
            ShortLinkNotFoundError:
                If the shortcode is unknown.
            DataStoreError:
                If the backend could not be read.
        """
        return self.dao.lookup(shortcode).target

    def close(self) -> None:
        self.dao.close()

    def __enter__(self) -> 'ShortLinkStore':
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
