import numpy as np

from core.backends import get_backend
from core.field import FieldData, WaveGenerations


def test_field_data_wraps_matrix():
    matrix = np.zeros((4, 6))
    field = FieldData(matrix)
    assert (field.nx, field.ny) == (4, 6)
    assert field.get_field_matrix() is matrix


def test_wave_generations_are_separate_buffers():
    g = WaveGenerations(3, 5, dtype=np.float32)
    old, now, new = g.buffers()
    assert old.shape == (3, 5) and old.dtype == np.float32
    assert not np.shares_memory(old, now)
    assert not np.shares_memory(now, new)


def test_backend_is_built_from_params_alone():
    backend = get_backend({"backend": "numpy", "quiet_mode": True})
    backend.setup_computation(3, 3)
    lam = np.ones((3, 3))
    u = np.arange(9, dtype=np.float64).reshape(3, 3)
    out = backend.update(np.empty_like(u), u, u, lam, 1.0, 1.0, 0.0, 0.25, 0.25)
    np.testing.assert_array_equal(out, u)
