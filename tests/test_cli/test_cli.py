"""Tests for the dla-scene command line."""

from dlascene.cli import main
from tests.conftest import CLUSTER_CELLS, CLUSTER_CSV


def _input(tmp_path):
    path = tmp_path / "cells.csv"
    path.write_text(CLUSTER_CSV)
    return path


def test_exports_requested_formats(tmp_path, capsys):
    out = tmp_path / "dla.pov"
    code = main([str(_input(tmp_path)), "-s", "povray", "-s", "csv", "-s", "povray", "-o", str(out)])
    assert code == 0
    assert (tmp_path / "dla.pov").exists()
    assert len((tmp_path / "dla.csv").read_text().splitlines()) == len(CLUSTER_CELLS)
    assert not (tmp_path / "dla.js").exists()

    stdout = capsys.readouterr().out
    assert "# DLA" in stdout
    assert f"It contains {len(CLUSTER_CELLS)} particles" in stdout
    assert stdout.count("## PovRay Scene") == 1
    assert "## Csv Scene" in stdout


def test_default_format_is_povray(tmp_path):
    out = tmp_path / "scene"
    assert main([str(_input(tmp_path)), "-o", str(out)]) == 0
    assert (tmp_path / "scene.pov").exists()


def test_unknown_format_fails_before_reading(tmp_path, capsys):
    code = main([str(tmp_path / "missing.csv"), "-s", "blender", "-o", str(tmp_path / "dla")])
    assert code == 1
    assert "`blender` is not a valid scene format" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_missing_input(tmp_path, capsys):
    code = main([str(tmp_path / "missing.csv"), "-o", str(tmp_path / "dla")])
    assert code == 1
    assert "error:" in capsys.readouterr().err


def test_malformed_input(tmp_path, capsys):
    path = tmp_path / "cells.csv"
    path.write_text("0,0,0\n1,1\n")
    assert main([str(path), "-o", str(tmp_path / "dla")]) == 1
    assert "line 2" in capsys.readouterr().err


def test_non_utf8_input(tmp_path, capsys):
    path = tmp_path / "cells.csv"
    path.write_bytes(b"0,0,0\n\xff\xfe,1,1\n")
    assert main([str(path), "-o", str(tmp_path / "dla")]) == 1
    err = capsys.readouterr().err
    assert "not valid UTF-8" in err
    assert not (tmp_path / "dla.pov").exists()
