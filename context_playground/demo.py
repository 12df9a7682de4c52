"""
Walk through the scoped-context runner with a file, a settings writer and a settings store.

Run: python -m context_playground --file README.md
"""

import logging
import os
import tempfile
from argparse import ArgumentParser

from . import config
from .context import with_context
from .file_reader import FileReaderContext
from .settings import SettingsStore, SettingsWriter


def file_demo(path):
    print("=" * 50)

    def read(context):
        text = context.read_text()
        print(f"read {len(text)} characters from {path}")

    context = FileReaderContext(path)
    with_context(context, read)
    print(f"closed after with_context: {context.closed}")

    def fail(context):
        raise RuntimeError("failed while reading")

    # the error is handed to exit, not raised here
    error = with_context(FileReaderContext(path), fail)
    print(f"captured: {error!r}")


def settings_writer_demo(path):
    print("=" * 50)

    def write(context):
        context.write("SomeKey1", "SomeValue1")
        context.write("SomeKey2", "SomeValue2")

    with_context(SettingsWriter(path), write)

    with SettingsStore.open(path) as store:
        print(f"stored: {dict(store)}")


def settings_store_demo(path):
    print("=" * 50)
    store = SettingsStore.open(path)
    try:
        with_context(store, lambda s: s.update(SomeKey3="SomeValue3"))
        print(f"stored: {dict(store)}")
    finally:
        store.close()


def absent_context_demo():
    print("=" * 50)
    with_context(None, lambda context: print("never printed"))
    print("nothing ran for an absent context")


def main():
    config.load_env()

    parser = ArgumentParser()
    parser.add_argument("--file", type=str, default=None, help="text file to read, defaults to a generated one")
    parser.add_argument("--settings-path", type=str, default=config.default_settings_path())
    parser.add_argument("--log-level", type=str, default=config.default_log_level())
    args = parser.parse_args()

    config.setup_logging(args.log_level)

    if args.file is None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "playground.txt")
            with open(path, "w") as f:
                f.write("hello from the playground\n")
            logging.info(f"generated {path}")
            file_demo(path)
    else:
        file_demo(args.file)

    settings_writer_demo(args.settings_path)
    settings_store_demo(args.settings_path)
    absent_context_demo()


if __name__ == "__main__":
    main()
