"""Tests for tools/calc.py."""

import json

from tools import calc

DOCUMENT = {
    "difficulty": {
        "aim": 3.1,
        "speed": 2.7,
        "sliders": 80,
        "circles": 250,
        "spinners": 1,
        "object_count": 331,
        "max_combo": 500,
        "approach_rate": 9.5,
        "overall_difficulty": 9.0,
    },
    "score": {"count_ok": 5, "count_miss": 1, "max_combo": 410, "accuracy": 0.985},
    "mods": ["HD"],
}


def _write(tmp_path, document):
    path = tmp_path / "play.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def test_single_play(tmp_path, capsys):
    assert calc.main([_write(tmp_path, DOCUMENT)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("#1: ")
    assert "pp (aim " in out
    assert "effective misses" in out


def test_json_output(tmp_path, capsys):
    assert calc.main([_write(tmp_path, DOCUMENT), "--json"]) == 0

    ratings = json.loads(capsys.readouterr().out)
    assert len(ratings) == 1
    assert ratings[0]["pp"] > 0
    assert ratings[0]["effective_miss_count"] >= 1


def test_batch(tmp_path, capsys):
    document = {
        "difficulty": DOCUMENT["difficulty"],
        "plays": [
            {"score": {"accuracy": 1.0}},
            {"score": {"count_miss": 4, "accuracy": 0.96}, "mods": ["RX"]},
        ],
    }
    assert calc.main([_write(tmp_path, document), "--json"]) == 0

    ratings = json.loads(capsys.readouterr().out)
    assert len(ratings) == 2
    assert ratings[0]["pp"] > ratings[1]["pp"]
    assert ratings[1]["pp_speed"] == 0.0


def test_calculate_document_matches_batch():
    single = calc.calculate_document(DOCUMENT)
    batch = calc.calculate_document(
        {
            "difficulty": DOCUMENT["difficulty"],
            "plays": [{"score": DOCUMENT["score"], "mods": DOCUMENT["mods"]}],
        },
    )
    assert single == batch


def test_invalid_request(tmp_path, capsys):
    document = dict(DOCUMENT, score={"accuracy": 2.0})
    assert calc.main([_write(tmp_path, document)]) == 1
    assert capsys.readouterr().out == ""


def test_invalid_json(tmp_path):
    path = tmp_path / "play.json"
    path.write_text("{not json", encoding="utf-8")
    assert calc.main([str(path)]) == 1


def test_non_object_document(tmp_path):
    assert calc.main([_write(tmp_path, [DOCUMENT])]) == 1


def test_unknown_mod(tmp_path, capsys):
    document = dict(DOCUMENT, mods=["ZZ"])
    assert calc.main([_write(tmp_path, document)]) == 1
    assert capsys.readouterr().out == ""
