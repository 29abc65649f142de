import json
from pathlib import Path

import pytest

from linspell.__main__ import main


def _table(tmp: Path) -> str:
    f = tmp / "dict.txt"
    f.write_text("the 100\nten 5\ntea 7\n", encoding="utf-8")
    return str(f)


def test_cli_single_query_json(tmp_path: Path, capsys):
    assert main(["--dictionary", _table(tmp_path), "--q", "teh", "--json"]) == 0
    out = capsys.readouterr().out
    header, body = out.split("\n", 1)
    assert header.startswith("Dictionary: 3 terms")
    assert json.loads(body) == [
        {"term": "the", "distance": 1, "count": 100},
        {"term": "tea", "distance": 1, "count": 7},
        {"term": "ten", "distance": 1, "count": 5},
    ]


def test_cli_table_output_and_save(tmp_path: Path, capsys):
    corpus = tmp_path / "c"; corpus.mkdir()
    (corpus / "x.txt").write_text("spam spam eggs\n", encoding="utf-8")
    saved = tmp_path / "saved.txt"
    assert main(["--corpus", str(corpus), "--q", "spma", "-k", "1", "--save", str(saved)]) == 0
    out = capsys.readouterr().out
    assert "spam" in out
    assert saved.read_text(encoding="utf-8").splitlines() == ["spam 2", "eggs 1"]


def test_cli_no_suggestions(tmp_path: Path, capsys):
    main(["--dictionary", _table(tmp_path), "--q", "zzzzz", "-d", "1", "--exhaustive"])
    assert "(no suggestions)" in capsys.readouterr().out


def test_cli_rejects_negative_distance(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", _table(tmp_path), "-d", "-1"])
    assert exc.value.code == 2


def test_cli_reports_missing_dictionary(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(tmp_path / "missing.txt")])
    assert exc.value.code == 2
