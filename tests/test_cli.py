import numpy as np
import pytest

from gaussrow.cli import main
from gaussrow.csv_io import read_matrix, write_matrix

SYSTEM = [[1, 2, 3, 6], [0, 1, 2, 4], [0, 0, 1, 1]]


def test_main_with_arguments(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_matrix("system.csv", SYSTEM, ",")
    status = main(["system.csv", ","])
    assert status == 0
    assert "One solution" in capsys.readouterr().out
    result = read_matrix(tmp_path / "GaussSolver.csv", ",")
    assert np.allclose(result[:, -1], [-1.0, 2.0, 1.0])


def test_main_prompts_for_missing_values(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_matrix("system.csv", SYSTEM, ";")
    answers = iter(["system.csv", ";"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    result = read_matrix(tmp_path / "GaussSolver.csv", ";")
    assert result.shape == (3, 4)


def test_main_custom_output(tmp_path):
    source = tmp_path / "system.csv"
    write_matrix(source, SYSTEM, ",")
    target = tmp_path / "answer.csv"
    assert main([str(source), ",", "--output", str(target)]) == 0
    assert np.allclose(read_matrix(target, ",")[:, :-1], np.eye(3))


def test_main_missing_file_returns_error(tmp_path, capsys):
    status = main([str(tmp_path / "absent.csv"), ","])
    assert status == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_rejects_long_delimiter(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "x.csv"), ",,"])
    assert info.value.code == 2