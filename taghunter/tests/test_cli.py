import json

from taghunter.cli import main


def test_init_then_queries(tmp_db_path, capsys):
    assert main(["--db", tmp_db_path, "init"]) == 0
    assert tmp_db_path in capsys.readouterr().out

    assert main(["--db", tmp_db_path, "game-types"]) == 0
    names = [g["name"] for g in json.loads(capsys.readouterr().out)]
    assert names == ["Airsoft", "Laser Tag"]

    assert main(["--db", tmp_db_path, "scenarios", "--game-type", "1"]) == 0
    items = json.loads(capsys.readouterr().out)
    assert len(items) == 5


def test_init_failure_exits_non_zero(tmp_path, capsys):
    assert main(["--db", str(tmp_path), "init"]) == 1
    assert "failed to initialize store" in capsys.readouterr().err


def test_init_creates_missing_parent_directory(tmp_path, capsys):
    path = tmp_path / "a" / "b.db"
    assert main(["--db", str(path), "init"]) == 0
    assert path.exists()
