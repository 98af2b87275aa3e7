import numpy as np
import pytest

from physics import profiles


def test_height_plus_depth_is_one_everywhere():
    for i in range(71):
        for j in range(71):
            total = profiles.initial_height(i, j) + profiles.terrain_depth(i, j)
            assert total == pytest.approx(1.0, abs=1e-15)


def test_peak_sits_on_the_corner():
    assert profiles.initial_height(0, 0) == 1.0
    assert profiles.terrain_depth(0, 0) == 0.0
    assert profiles.initial_height(35, 35) < 1e-100


def test_grid_providers_match_point_functions():
    bell = dict(amplitude=1.0, sigma_x=1.0, sigma_y=1.0, x_center=0.0, y_center=0.0)
    height = profiles.gaussian_height(6, 4, **bell)
    depth = profiles.inverted_gaussian_depth(6, 4, **bell)
    assert height.shape == (6, 4)
    for i in range(6):
        for j in range(4):
            assert height[i, j] == pytest.approx(profiles.initial_height(i, j), rel=1e-14)
            assert depth[i, j] == pytest.approx(profiles.terrain_depth(i, j), rel=1e-14, abs=1e-15)


def test_custom_bell_parameters():
    value = profiles.initial_height(3, 1, amplitude=2.0, sigma_x=2.0, sigma_y=0.5, x_center=1.0, y_center=1.0)
    assert value == pytest.approx(2.0 * np.exp(-0.5))


def test_constant_depth():
    np.testing.assert_array_equal(profiles.constant_depth(3, 5, value=0.7), np.full((3, 5), 0.7))


def test_from_file_same_grid(tmp_path):
    data = np.arange(12, dtype=np.float64).reshape(4, 3)
    path = tmp_path / "depth.npz"
    np.savez(path, depth=data)
    np.testing.assert_array_equal(profiles.from_file(str(path), 4, 3), data)


def test_from_file_resamples_linear_ramp(tmp_path):
    ramp = np.repeat(np.linspace(0.0, 1.0, 5)[:, None], 5, axis=1)
    path = tmp_path / "ramp.npy"
    np.save(path, ramp)
    resampled = profiles.from_file(str(path), 9, 3)
    assert resampled.shape == (9, 3)
    np.testing.assert_allclose(resampled[:, 0], np.linspace(0.0, 1.0, 9), atol=1e-12)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        profiles.from_file(str(tmp_path / "nope.npz"), 3, 3)


def test_from_file_unknown_array(tmp_path):
    path = tmp_path / "fields.npz"
    np.savez(path, depth=np.ones((3, 3)))
    with pytest.raises(ValueError):
        profiles.from_file(str(path), 3, 3, array_name="height")
