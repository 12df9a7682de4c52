import logging
import os
import tempfile

import dotenv

SETTINGS_PATH_ENV = "CONTEXT_PLAYGROUND_SETTINGS_PATH"
LOG_LEVEL_ENV = "CONTEXT_PLAYGROUND_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def load_env():
    # values already exported in the shell win over .env
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True), override=False)


def default_settings_path() -> str:
    return os.getenv(SETTINGS_PATH_ENV) or os.path.join(tempfile.gettempdir(), "settings.db")


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def setup_logging(level=None):
    logging.basicConfig(
        level=level or default_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
