import io
import logging

import pytest

from city_search.app import cli


@pytest.fixture(autouse=True)
def _fresh_logger():
    yield
    logging.getLogger("city_search").handlers.clear()


DATA = "Oslo\n0-0\nBergen\n3-4\nStavanger\n-1-2\n"


@pytest.fixture
def data_file(tmp_path):
    p = tmp_path / "data.txt"
    p.write_text(DATA, encoding="utf-8")
    return p


def test_one_shot_query(data_file, capsys):
    rc = cli.main(["--data", str(data_file), "--city", "Oslo", "--radius", "5", "--norm", "l2"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out[1] == "3 city/cities found within the given radius."
    assert out[-3:] == ["Oslo", "Stavanger", "Bergen"]


def test_one_shot_numeric_norm(data_file, capsys):
    assert cli.main(["--data", str(data_file), "--city", "Oslo", "--radius", "3", "--norm", "2"]) == 0
    assert capsys.readouterr().out.splitlines()[-2:] == ["Oslo", "Stavanger"]


def test_one_shot_unknown_city(data_file, capsys):
    assert cli.main(["--data", str(data_file), "--city", "Lima", "--radius", "5"]) == 1
    assert "isn't found" in capsys.readouterr().out


def test_one_shot_negative_radius(data_file, capsys):
    assert cli.main(["--data", str(data_file), "--city", "Oslo", "--radius", "-1"]) == 1
    assert "radius" in capsys.readouterr().out


def test_bad_norm_is_usage_error(data_file):
    with pytest.raises(SystemExit) as ei:
        cli.main(["--data", str(data_file), "--city", "Oslo", "--radius", "1", "--norm", "9"])
    assert ei.value.code == 2


def test_city_without_radius_is_usage_error(data_file):
    with pytest.raises(SystemExit) as ei:
        cli.main(["--data", str(data_file), "--city", "Oslo"])
    assert ei.value.code == 2


def test_missing_data_file_exits_1(tmp_path, capsys):
    assert cli.main(["--data", str(tmp_path / "none.txt")]) == 1
    assert "Error while reading the file" in capsys.readouterr().err


def test_malformed_data_file_exits_1(tmp_path, capsys):
    p = tmp_path / "data.txt"
    p.write_text("Oslo\n0-0\nBergen\n", encoding="utf-8")
    assert cli.main(["--data", str(p)]) == 1
    captured = capsys.readouterr()
    assert "incomplete record" in captured.err
    assert captured.out == ""


def test_interactive_mode_reads_stdin(data_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Bergen\n0\n0\n0\n"))
    assert cli.main(["--data", str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "1 city/cities found within the given radius." in out
    assert out.endswith("Bye\n")


def test_config_file_and_override(tmp_path, data_file, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("data:\n  path: /does/not/exist\nshell:\n  default_norm: 2\n", encoding="utf-8")
    rc = cli.main(["--config", str(cfg), "--data", str(data_file), "--city", "Oslo", "--radius", "3"])
    assert rc == 0
    # default_norm 2 (L1): Bergen is 7 away
    assert capsys.readouterr().out.splitlines()[-2:] == ["Oslo", "Stavanger"]


def test_bad_config_exits_1(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("nonsense: true\n", encoding="utf-8")
    assert cli.main(["--config", str(cfg)]) == 1
    assert "Error while reading the config" in capsys.readouterr().err
