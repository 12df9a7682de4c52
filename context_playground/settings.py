"""
Key-value settings persisted through shelve, flushed when the scope ends.

docs: https://docs.python.org/3/library/shelve.html
"""

import logging
import shelve
from typing import Any, Optional

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from . import config
from .context import Context

logger = logging.getLogger(__name__)

flush_retry = retry(
    retry=retry_if_exception_type(OSError),
    stop=stop_after_attempt(3),
    wait=wait_fixed(0.1),
    reraise=True,
)


class SettingsWriter(Context):
    """One-shot writer: opens the store on enter, flushes and closes it on exit."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or config.default_settings_path()
        self.settings = None

    def enter(self) -> None:
        self.settings = shelve.open(self.path)
        logger.debug(f"opened settings at {self.path}")

    def exit(self, error: Optional[BaseException]) -> None:
        if error is not None:
            logger.warning(f"flushing {self.path} after failure: {error!r}")
        # detach first so a failed flush still leaves the writer closed
        settings, self.settings = self.settings, None
        try:
            self.flush(settings)
        finally:
            settings.close()

    @staticmethod
    @flush_retry
    def flush(settings):
        settings.sync()

    def write(self, key: str, value: Any):
        if self.settings is None:
            raise RuntimeError(f"settings at {self.path} are not open, write inside with_context")
        self.settings[key] = value


class SettingsStore(shelve.DbfilenameShelf, Context):
    """A regular shelve store that also satisfies `Context`.

    Only stores opened through this class conform; a shelf from a plain
    `shelve.open()` has no `enter`/`exit`. The store stays open after `exit`, which only synchronises it. Closing is
    left to its owner, or to the native `with` statement as for any shelf.
    """

    @classmethod
    def open(cls, path: Optional[str] = None, writeback: bool = False) -> "SettingsStore":
        return cls(path or config.default_settings_path(), writeback=writeback)

    def enter(self) -> None:
        pass

    def exit(self, error: Optional[BaseException]) -> None:
        if error is not None:
            logger.warning(f"synchronising settings after failure: {error!r}")
        self.flush()

    @flush_retry
    def flush(self):
        self.sync()

    def write(self, key: str, value: Any):
        self[key] = value
