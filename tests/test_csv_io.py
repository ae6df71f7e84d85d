import numpy as np
import pytest

from gaussrow.csv_io import CsvError, read_matrix, write_matrix


def test_read_write_round_trip(tmp_path):
    test_mat = np.array(
        [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]], dtype=float
    )
    path = tmp_path / "test_csv.csv"
    write_matrix(path, test_mat, ",")
    read_mat = read_matrix(path, ",")
    assert read_mat.shape == test_mat.shape
    assert np.allclose(read_mat, test_mat)


def test_round_trip_with_other_delimiter(tmp_path):
    test_mat = np.array([[1.5, -2.0], [0.25, 8.0]])
    path = tmp_path / "semi.csv"
    write_matrix(path, test_mat, ";")
    assert np.allclose(read_matrix(path, ";"), test_mat)


def test_written_text_layout(tmp_path):
    path = tmp_path / "out.csv"
    write_matrix(path, [[1, 2, 3, 4], [5, 6, 7, 8]], ",")
    assert path.read_text() == "1,2,3,4\n5,6,7,8\n"


def test_empty_file_gives_empty_matrix(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert read_matrix(path, ",").shape == (0, 0)


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("1,2\n\n3,4\n\n")
    result = read_matrix(path, ",")
    assert np.array_equal(result, np.array([[1.0, 2.0], [3.0, 4.0]]))


def test_trailing_delimiter_is_ignored(tmp_path):
    path = tmp_path / "trail.csv"
    path.write_text("1,2,\n3,4,\n")
    assert read_matrix(path, ",").shape == (2, 2)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_matrix(tmp_path / "missing.csv", ",")


def test_bad_cell_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,abc\n")
    with pytest.raises(CsvError, match="Error converting string to double"):
        read_matrix(path, ",")


def test_empty_cell_raises(tmp_path):
    path = tmp_path / "gap.csv"
    path.write_text("1,,2\n")
    with pytest.raises(CsvError):
        read_matrix(path, ",")


def test_inconsistent_columns_raise(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("1,2,3\n4,5\n")
    with pytest.raises(CsvError, match="Inconsistent number of columns"):
        read_matrix(path, ",")


def test_write_rejects_one_dimensional(tmp_path):
    with pytest.raises(ValueError):
        write_matrix(tmp_path / "x.csv", [1, 2, 3], ",")