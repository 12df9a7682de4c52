import sys
import tempfile

from context_playground import demo


def test_demo_runs_every_scenario(monkeypatch, tmp_path, capsys):
    text_file = tmp_path / "test"
    text_file.write_text("hello")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        sys,
        "argv",
        ["context-playground", "--file", str(text_file), "--settings-path", str(tmp_path / "settings")],
    )

    demo.main()

    out = capsys.readouterr().out
    assert "read 5 characters" in out
    assert "closed after with_context: True" in out
    assert "captured: RuntimeError('failed while reading')" in out
    assert "'SomeKey1': 'SomeValue1'" in out
    assert "'SomeKey3': 'SomeValue3'" in out
    assert "never printed" not in out


def test_demo_removes_generated_file(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    monkeypatch.setattr(sys, "argv", ["context-playground", "--settings-path", str(tmp_path / "settings")])

    demo.main()

    assert "closed after with_context: True" in capsys.readouterr().out
    assert not any(p.name.endswith(".txt") for p in tmp_path.rglob("*"))
    assert not [p for p in tmp_path.iterdir() if p.is_dir()]
