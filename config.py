# shallow_wave/config.py

from user_config import *

# ==============================================================================
# 模擬設定 (單一模式)
# ==============================================================================
def get_config() -> dict:
    """返回唯一的模擬設定字典。每次呼叫都返回新的副本。"""

    params = {
        # --- 後端與高層配置 ---
        'backend': backend,
        'boundary_condition': 'reflecting',
        'rotation_rule': rotation_rule,
        'precision': 'float64',

        # --- 路徑設定 ---
        'output_path': output_path,
        'default_export_path': 'exported_data',
        'plot_output_path': 'simulation_plots',

        # --- 網格與時間推進 ---
        'nx': nx,
        'ny': ny,
        'tmax': tmax,
        'rx': rx,
        'ry': ry,

        # --- 初始波高與地形 ---
        'height_config_name': 'gaussian_corner',
        'depth_config_name': 'inverted_gaussian_corner',
        'amplitude': amplitude,
        'sigma_x': sigma_x,
        'sigma_y': sigma_y,
        'x_center': x_center,
        'y_center': y_center,
        'depth_value': 1.0,        # 僅 'flat' 地形使用
        'height_file': '',         # 僅 'from_file' 使用
        'depth_file': '',
        'height_array': '',        # .npz 中的陣列名稱，空字串表示第一個陣列
        'depth_array': 'depth',    # 與導出的 final_fields.npz 鍵名一致

        # --- 輸出與分析 ---
        'enable_export': enable_export,
        'enable_plots': enable_plots,
        'snapshot_interval': snapshot_interval,
        'stats_interval': 25,
        'check_finite': True,
        'quiet_mode': False,
    }

    return params
