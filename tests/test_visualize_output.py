import numpy as np
import pytest

from analysis.io import format_diagonal
from visualize_output import load_diagonal_file, load_output_file, visualize_file_data


def test_load_diagonal_file(tmp_path):
    path = tmp_path / "diag.txt"
    path.write_text(format_diagonal(np.diag([0.5, 0.25, -1.0])))
    data = load_diagonal_file(str(path))
    np.testing.assert_array_equal(data, [[0, 0, 0.5], [1, 1, 0.25], [2, 2, -1.0]])


def test_load_npz_by_name(tmp_path):
    path = tmp_path / "fields.npz"
    np.savez(path, u_now=np.ones((2, 2)), depth=np.zeros((2, 2)))
    data, name = load_output_file(str(path), "depth")
    assert name == "depth"
    np.testing.assert_array_equal(data, np.zeros((2, 2)))


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_output_file(str(tmp_path / "none.npy"))
    bad = tmp_path / "data.csv"
    bad.write_text("1,2,3")
    with pytest.raises(ValueError):
        load_output_file(str(bad))


def test_visualize_saves_figures(tmp_path):
    txt = tmp_path / "diag.txt"
    txt.write_text(format_diagonal(np.eye(4)))
    npz = tmp_path / "fields.npz"
    np.savez(npz, history_fields=np.random.default_rng(0).random((3, 4, 4)))

    visualize_file_data(str(txt), save_path=str(tmp_path / "plots" / "diag.png"))
    visualize_file_data(str(npz), array_name="history_fields", save_path=str(tmp_path / "plots" / "field.png"))

    assert (tmp_path / "plots" / "diag.png").exists()
    assert (tmp_path / "plots" / "field.png").exists()
