import numpy as np
import pytest

from config import get_config
from simulation_setup import setup_simulation_environment


def test_default_config_builds_reference_fields(params):
    initial_field, depth_field, updated = setup_simulation_environment(params)
    height = initial_field.get_field_matrix()
    depth = depth_field.get_field_matrix()
    assert height.shape == depth.shape == (71, 71)
    assert height[0, 0] == 1.0
    np.testing.assert_allclose(height + depth, 1.0, atol=1e-15)
    assert updated is not params


def test_get_config_returns_fresh_dict():
    first = get_config()
    first["nx"] = 5
    assert get_config()["nx"] == 71


@pytest.mark.parametrize("key, value", [
    ("nx", 2),
    ("ny", 1),
    ("tmax", -1),
    ("height_config_name", "plane_wave"),
    ("depth_config_name", "canyon"),
    ("rotation_rule", "shuffle"),
    ("boundary_condition", "periodic"),
    ("backend", "gpu"),
])
def test_invalid_settings_are_rejected(small_params, key, value):
    small_params[key] = value
    with pytest.raises(ValueError):
        setup_simulation_environment(small_params)


def test_flat_depth(small_params):
    small_params.update({"depth_config_name": "flat", "depth_value": 0.3})
    _, depth_field, _ = setup_simulation_environment(small_params)
    np.testing.assert_array_equal(depth_field.get_field_matrix(), np.full((9, 7), 0.3))


def test_missing_depth_file(small_params, tmp_path):
    small_params.update({"depth_config_name": "from_file", "depth_file": str(tmp_path / "missing.npz")})
    with pytest.raises(FileNotFoundError):
        setup_simulation_environment(small_params)


def test_depth_from_file(small_params, tmp_path):
    path = tmp_path / "terrain.npy"
    np.save(path, np.full((9, 7), 0.6))
    small_params.update({"depth_config_name": "from_file", "depth_file": str(path)})
    _, depth_field, _ = setup_simulation_environment(small_params)
    np.testing.assert_array_equal(depth_field.get_field_matrix(), np.full((9, 7), 0.6))


@pytest.mark.parametrize("precision", ["float16", "Float64"])
def test_unknown_precision_is_rejected(small_params, precision):
    small_params["precision"] = precision
    with pytest.raises(ValueError):
        setup_simulation_environment(small_params)


def test_depth_from_exported_fields_uses_depth_array(small_params, tmp_path):
    path = tmp_path / "final_fields.npz"
    np.savez(path, u_now=np.full((9, 7), 5.0), depth=np.full((9, 7), 0.4))
    small_params.update({"depth_config_name": "from_file", "depth_file": str(path)})
    _, depth_field, _ = setup_simulation_environment(small_params)
    np.testing.assert_array_equal(depth_field.get_field_matrix(), np.full((9, 7), 0.4))


def test_height_array_can_be_chosen(small_params, tmp_path):
    path = tmp_path / "fields.npz"
    np.savez(path, depth=np.zeros((9, 7)), u_now=np.full((9, 7), 0.2))
    small_params.update({"height_config_name": "from_file", "height_file": str(path), "height_array": "u_now"})
    initial_field, _, _ = setup_simulation_environment(small_params)
    np.testing.assert_array_equal(initial_field.get_field_matrix(), np.full((9, 7), 0.2))
