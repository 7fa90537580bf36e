import pytest

from hdrscan.files import read_file_content


def test_reads_whole_file(tmp_path):
    text = "#pragma once\nvoid test_bro();\n"
    (tmp_path / "a.h").write_text(text, encoding="utf-8")
    assert read_file_content("a.h", tmp_path) == text


def test_line_endings_are_preserved(tmp_path):
    (tmp_path / "crlf.h").write_bytes(b"int x;\r\nint y;\r\n")
    content = read_file_content("crlf.h", tmp_path)
    assert content == "int x;\r\nint y;\r\n"
    assert len(content) == len(b"int x;\r\nint y;\r\n")


def test_empty_file_gives_empty_string(tmp_path):
    (tmp_path / "empty.h").write_text("", encoding="utf-8")
    assert read_file_content("empty.h", tmp_path) == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_content("missing.h", tmp_path)


def test_default_directory_is_example(tmp_path, monkeypatch):
    folder = tmp_path / "example"
    folder.mkdir()
    (folder / "def.h").write_text("#define T_ERROR -1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert read_file_content("def.h") == "#define T_ERROR -1\n"