import matplotlib
matplotlib.use("Agg")

import pytest

from config import get_config


@pytest.fixture
def params(tmp_path):
    p = get_config()
    p["quiet_mode"] = True
    p["output_path"] = str(tmp_path / "wave_diagonal.txt")
    p["default_export_path"] = str(tmp_path / "exported_data")
    p["plot_output_path"] = str(tmp_path / "plots")
    return p


@pytest.fixture
def small_params(params):
    params.update({"nx": 9, "ny": 7, "tmax": 20})
    return params
