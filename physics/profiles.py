# shallow_wave/physics/profiles.py

import os
import numpy as np
from scipy.interpolate import RegularGridInterpolator

# ==============================================================================
# 1. 定义单点场函数
# ==============================================================================

def gaussian(i, j, amplitude=1.0, sigma_x=1.0, sigma_y=1.0, x_center=0.0, y_center=0.0):
    """
    钟形曲线 A * exp(-0.5*((i-xc)/σx)^2 - 0.5*((j-yc)/σy)^2)。
    i, j 可以是整数，也可以是 numpy 索引数组。
    """
    return amplitude * np.exp(-0.5 * ((i - x_center) / sigma_x) ** 2 - 0.5 * ((j - y_center) / sigma_y) ** 2)

def initial_height(i, j, amplitude=1.0, sigma_x=1.0, sigma_y=1.0, x_center=0.0, y_center=0.0):
    """初始波高。预设中心 (0, 0) 位于网格角落，而非中央。"""
    return float(gaussian(i, j, amplitude, sigma_x, sigma_y, x_center, y_center))

def terrain_depth(i, j, amplitude=1.0, sigma_x=1.0, sigma_y=1.0, x_center=0.0, y_center=0.0):
    """地形深度，倒置的钟形曲线：1 - initial_height。"""
    return 1.0 - initial_height(i, j, amplitude, sigma_x, sigma_y, x_center, y_center)

# ==============================================================================
# 2. 定义整场生成函数 (Providers)
# ==============================================================================

def _grid_indices(nx, ny):
    return np.indices((nx, ny), dtype=np.float64)

def gaussian_height(nx, ny, amplitude, sigma_x, sigma_y, x_center, y_center, **kwargs):
    """生成 (nx, ny) 的钟形初始波高场。"""
    ii, jj = _grid_indices(nx, ny)
    return gaussian(ii, jj, amplitude, sigma_x, sigma_y, x_center, y_center)

def inverted_gaussian_depth(nx, ny, amplitude, sigma_x, sigma_y, x_center, y_center, **kwargs):
    """生成 (nx, ny) 的倒钟形地形深度场。"""
    return 1.0 - gaussian_height(nx, ny, amplitude, sigma_x, sigma_y, x_center, y_center)

def constant_depth(nx, ny, value=1.0, **kwargs):
    """处处相同的深度，用于检验常深度下退化为离散拉普拉斯算子。"""
    return np.full((nx, ny), float(value))

def from_file(path, nx, ny, array_name=None, **kwargs):
    """
    从 .npz / .npy 文件加载二维场。
    如果文件中的网格与模拟网格不匹配，将使用插值进行重采样。
    """
    print(f"  [場初始化] 正在从文件 '{path}' 加载场...")
    if path is None or not os.path.exists(path):
        raise FileNotFoundError(f"错误：场文件 '{path}' 不存在。")

    data = np.load(path)
    if isinstance(data, np.ndarray):
        loaded = data
    else:
        key = array_name if array_name is not None else data.files[0]
        if key not in data.files:
            raise ValueError(f"错误：文件 '{path}' 中不包含数组 '{key}'。可用: {data.files}")
        loaded = data[key]

    if loaded.ndim != 2:
        raise ValueError(f"错误：场文件必须是二维数组，实际维度为 {loaded.shape}。")

    nx_source, ny_source = loaded.shape
    if nx_source == nx and ny_source == ny:
        print("  [場初始化] 文件网格与模拟网格匹配，直接使用。")
        return loaded.astype(np.float64)

    print("  [場初始化] 文件网格与模拟网格不匹配，正在进行插值重采样...")
    # 以单位正方形作为两套网格的共同坐标
    x_source = np.linspace(0.0, 1.0, nx_source)
    y_source = np.linspace(0.0, 1.0, ny_source)
    interpolator = RegularGridInterpolator((x_source, y_source), loaded,
                                           bounds_error=False, fill_value=None)

    xv, yv = np.meshgrid(np.linspace(0.0, 1.0, nx), np.linspace(0.0, 1.0, ny), indexing='ij')
    points = np.vstack((xv.ravel(), yv.ravel())).T
    resampled = interpolator(points).reshape(nx, ny)

    print(f"  [場初始化] 成功将场重采样至 ({nx} x {ny})。")
    return resampled

# ==============================================================================
# 3. 注册与命名配置
# ==============================================================================

field_source_registry = {
    'gaussian': gaussian_height,
    'inverted_gaussian': inverted_gaussian_depth,
    'constant': constant_depth,
    'from_file': from_file,
}

_BELL_ARGS = {
    'amplitude': lambda p: p['amplitude'],
    'sigma_x': lambda p: p['sigma_x'],
    'sigma_y': lambda p: p['sigma_y'],
    'x_center': lambda p: p['x_center'],
    'y_center': lambda p: p['y_center'],
}

# 'args' 中的可调用对象会以参数字典为输入求值
height_configs = {
    'gaussian_corner': {'provider': 'gaussian', 'args': dict(_BELL_ARGS)},
    'from_file': {'provider': 'from_file', 'args': {'path': lambda p: p.get('height_file'),
                                                  'array_name': lambda p: p.get('height_array') or None}},
}

depth_configs = {
    'inverted_gaussian_corner': {'provider': 'inverted_gaussian', 'args': dict(_BELL_ARGS)},
    'flat': {'provider': 'constant', 'args': {'value': lambda p: p.get('depth_value', 1.0)}},
    'from_file': {'provider': 'from_file', 'args': {'path': lambda p: p.get('depth_file'),
                                                  'array_name': lambda p: p.get('depth_array') or None}},
}
