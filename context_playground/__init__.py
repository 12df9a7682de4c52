from .context import Context, ContextManagerAdapter, with_context
from .file_reader import FileReaderContext
from .settings import SettingsStore, SettingsWriter

__version__ = "0.0.1"

__all__ = [
    "Context",
    "ContextManagerAdapter",
    "FileReaderContext",
    "SettingsStore",
    "SettingsWriter",
    "with_context",
    "__version__",
]
