import pytest

from color_rendering.__main__ import main
from color_rendering.cri import compute_cri
from color_rendering.light import Illuminant


def test_standard_illuminant(capsys):
    assert main(["--illuminant", "FL3.1", "--workers", "1"]) == 0
    out = capsys.readouterr().out
    assert "FL3.1" in out
    assert "R14" in out


def test_csv_source(tmp_path, capsys):
    path = tmp_path / "equal_energy.csv"
    path.write_text("380,1.0\n780,1.0\n")
    assert main(["--csv", str(path), "--workers", "1"]) == 0
    assert "equal_energy.csv" in capsys.readouterr().out


def test_failed_source_sets_exit_status(tmp_path, capsys):
    path = tmp_path / "line.csv"
    path.write_text("549,0.0\n550,1.0\n551,0.0\n")
    assert main(["--csv", str(path), "--workers", "1"]) == 1
    assert "cct-out-of-range" in capsys.readouterr().out


def test_unknown_illuminant():
    with pytest.raises(SystemExit) as excinfo:
        main(["--illuminant", "no such lamp"])
    assert excinfo.value.code == 1


def test_no_sources():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1


def test_prints_cct_of_the_computation(capsys):
    assert main(["--illuminant", "FL3.1", "--workers", "1"]) == 0
    cct = compute_cri(Illuminant.standard("FL3.1")).cct
    out = capsys.readouterr().out
    assert f"CCT {cct.t:.0f} K" in out
    assert "planckian reference" in out
