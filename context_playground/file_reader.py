import logging
from typing import Optional

from .context import Context

logger = logging.getLogger(__name__)


class FileReaderContext(Context):
    """Read-only file handle that is closed when the scope ends."""

    def __init__(self, path: str):
        self.path = path
        self.file_handle = open(path, "rb")

    def enter(self) -> None:
        # the handle is already open
        pass

    def exit(self, error: Optional[BaseException]) -> None:
        if error is not None:
            logger.warning(f"closing {self.path} after failure: {error!r}")
        self.file_handle.close()

    def read_text(self, encoding: str = "utf-8") -> str:
        return self.file_handle.read().decode(encoding)

    @property
    def closed(self) -> bool:
        return self.file_handle.closed
