import io
import json
import pathlib

import pytest
from numerus.scripts import count_cli


@pytest.fixture
def essay(tmp_path: pathlib.Path):
    path = tmp_path / "essay.html"
    path.write_text("<p>Hello&nbsp;there, world.</p><!-- draft -->[gallery id=3]<p>Goodbye--now</p>", encoding="utf-8")
    return path


def test_count_file(essay, capsys):
    assert count_cli([str(essay)]) == 0
    assert capsys.readouterr().out == "7\n"


@pytest.mark.parametrize(
    "count_type,expected",
    (
        ("words", "7\n"),
        ("charsExcludingSpaces", "42\n"),
        ("paragraphs", "7\n"),
    ),
)
def test_count_type(essay, capsys, count_type, expected):
    count_cli(["--type", count_type, str(essay)])
    assert capsys.readouterr().out == expected


def test_shortcodes(essay, capsys):
    count_cli(["--shortcode", "gallery", "--type", "charsExcludingSpaces", str(essay)])
    assert capsys.readouterr().out == "29\n"


def test_human(essay, capsys):
    count_cli(["--human", str(essay)])
    assert capsys.readouterr().out == "7 words\n"


def test_several_files(essay, tmp_path, capsys):
    other = tmp_path / "other.md"
    other.write_text("lonelyword", encoding="utf-8")
    count_cli([str(essay), str(other)])
    assert capsys.readouterr().out == f"{essay}: 7\n{other}: 1\ntotal: 8\n"


def test_markdown(tmp_path, capsys):
    path = tmp_path / "post.md"
    path.write_text("# A title\n\nSome **bold** words & more.\n", encoding="utf-8")
    count_cli(["--markdown", "--human", str(path)])
    assert capsys.readouterr().out == "6 words\n"


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("one two three"))
    count_cli([])
    assert capsys.readouterr().out == "3\n"


def test_settings_file(essay, tmp_path, capsys):
    settings = tmp_path / "numerus.json"
    settings.write_text(json.dumps({"count_type": "charsExcludingSpaces", "shortcodes": ["gallery"]}))
    count_cli(["--settings", str(settings), str(essay)])
    assert capsys.readouterr().out == "29\n"
    # the command line wins over the settings file
    count_cli(["--settings", str(settings), "--type", "words", "--shortcode", "audio", str(essay)])
    assert capsys.readouterr().out == "7\n"


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        count_cli([str(tmp_path / "nope.txt")])
    assert excinfo.value.code == 2
    assert "nope.txt" in capsys.readouterr().err


def test_bad_settings(essay, tmp_path):
    settings = tmp_path / "numerus.json"
    settings.write_text(json.dumps({"rules": {"html": "("}}))
    with pytest.raises(SystemExit) as excinfo:
        count_cli(["--settings", str(settings), str(essay)])
    assert excinfo.value.code == 2
