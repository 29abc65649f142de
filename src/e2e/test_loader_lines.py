from pathlib import Path

import pytest

from linspell.loader import iter_lines, iter_corpus_lines


def test_iter_lines_strips_line_endings(tmp_path: Path):
    f = tmp_path / "t.txt"
    f.write_bytes(b"one\r\ntwo\n\nthree")
    assert list(iter_lines(str(f))) == ["one", "two", "", "three"]


def test_iter_lines_missing_file_fails_up_front(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        iter_lines(str(tmp_path / "nope.txt"))


def test_iter_corpus_lines_walks_txt_files_in_order(tmp_path: Path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "2.txt").write_text("second\n", encoding="utf-8")
    (tmp_path / "1.txt").write_text("first\n", encoding="utf-8")
    (tmp_path / "skip.csv").write_text("nope\n", encoding="utf-8")
    assert list(iter_corpus_lines([str(tmp_path)])) == ["first", "second"]


def test_iter_corpus_lines_accepts_plain_files(tmp_path: Path):
    f = tmp_path / "big.dat"
    f.write_text("raw text\n", encoding="utf-8")
    assert list(iter_corpus_lines([str(f)])) == ["raw text"]


def test_iter_corpus_lines_missing_root(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        list(iter_corpus_lines([str(tmp_path / "missing")]))
