"""
A "with" statement spelled out as a plain function.

ref: https://peps.python.org/pep-0343/
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Context")


class Context(ABC):
    """Something that sets itself up in `enter` and tears itself down in `exit`."""

    @abstractmethod
    def enter(self) -> None:
        pass

    @abstractmethod
    def exit(self, error: Optional[BaseException]) -> None:
        pass

    # contexts also work with the native with statement
    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.exit(exc_value)
        return isinstance(exc_value, Exception)


def with_context(context: Optional[C], block: Callable[[C], Any]) -> Optional[Exception]:
    """Run `block` between `context.enter()` and `context.exit()`.

    An absent context skips everything. `exit` is called exactly once, with the
    exception the block raised or None. The exception is not re-raised.

    Args:
        context: Context to run the block in, or None
        block: Callable taking the context

    Returns:
        The exception raised by the block, if any.

    Example:
        >>> error = with_context(FileReaderContext("notes.txt"), lambda f: print(f.read_text()))
        ... # the file is closed here, error is None
    """
    if context is None:
        return None

    context.enter()
    try:
        block(context)
    except Exception as e:
        logger.debug(f"block failed inside {type(context).__name__}: {e!r}")
        context.exit(e)
        return e
    except BaseException as e:
        # interrupts still release the resource, then keep propagating
        context.exit(e)
        raise
    else:
        context.exit(None)
        return None


class ContextManagerAdapter(Context):
    """Drive a native context manager, e.g. `open(...)`, through `with_context`."""

    def __init__(self, manager):
        self.manager = manager
        self.value = None

    def enter(self) -> None:
        self.value = self.manager.__enter__()

    def exit(self, error: Optional[BaseException]) -> None:
        if error is None:
            self.manager.__exit__(None, None, None)
        else:
            self.manager.__exit__(type(error), error, error.__traceback__)
