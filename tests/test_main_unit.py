from pathlib import Path

import pytest

import main as entry
from polysolver import storage


@pytest.fixture(autouse=True)
def _tmp_db(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(storage, "_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(storage, "_DATA_FILE", str(tmp_path / "data" / "polysolver.json"))


def test_prints_report(capsys) -> None:
    assert entry.main(["2 * X = 4"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Reduced form: -4 + 2X = 0", "Polynomial degree: 1", "2 is a solution"]


def test_invalid_input(capsys) -> None:
    assert entry.main(["5 * X^2 ++ 2 = 6"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "ERROR: Invalid input"


def test_exponent_overflow(capsys) -> None:
    assert entry.main(["X^99999999999 = 0"]) == 1
    assert "maximal u32 value" in capsys.readouterr().err


def test_very_long_exponent_overflow(capsys) -> None:
    assert entry.main(["X^" + "9" * 5000 + " = 0"]) == 1
    assert "maximal u32 value" in capsys.readouterr().err


def test_degree_too_high(capsys) -> None:
    assert entry.main(["X^3 = 0"]) == 1
    out = capsys.readouterr().out
    assert "Polynomial degree: 3" in out
    assert "strictly greater than 2" in out


def test_bad_variable(capsys) -> None:
    assert entry.main(["X = 1", "--variable", "xy"]) == 2
    assert "single letter" in capsys.readouterr().err


def test_settings_drive_defaults(capsys) -> None:
    storage.save_settings({"variable": "t", "mode": "numerical"})
    assert entry.main(["t = 3"]) == 0
    assert "3 is a solution" in capsys.readouterr().out


def test_verify_plot_and_history(capsys, tmp_path: Path) -> None:
    plot = tmp_path / "out.png"
    code = entry.main(["X^2 = 4", "--verify", "--plot", str(plot), "--history"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Verification: pass" in out
    assert plot.exists()
    assert storage.get_history()[0]["equation"] == "X^2 = 4"


def test_missing_equation_prints_usage(capsys) -> None:
    with pytest.raises(SystemExit):
        entry.main([])
    assert "usage" in capsys.readouterr().err.lower()
