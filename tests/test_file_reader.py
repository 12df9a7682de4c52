import pytest

from context_playground import FileReaderContext, with_context


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "test"
    path.write_bytes("hello, playground\nsecond line\n".encode("utf-8"))
    return str(path)


def test_reads_contents_and_closes(text_file):
    context = FileReaderContext(text_file)
    contents = []

    with_context(context, lambda c: contents.append(c.read_text()))

    assert contents == ["hello, playground\nsecond line\n"]
    assert context.closed
    with pytest.raises(ValueError):
        context.read_text()


def test_closes_after_failure(text_file, caplog):
    context = FileReaderContext(text_file)

    def block(c):
        raise OSError("cannot parse")

    error = with_context(context, block)

    assert isinstance(error, OSError)
    assert context.closed
    assert "cannot parse" in caplog.text


def test_missing_file_fails_on_construction(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileReaderContext(str(tmp_path / "missing"))
