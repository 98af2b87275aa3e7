# shallow_wave/simulation_setup.py

import numpy as np
from typing import Dict, Any, Tuple

from core.field import FieldData
from core.backends import backend_registry
from physics import profiles, updates, boundaries

def _validate_configs(params: Dict[str, Any]):
    is_quiet = params.get('quiet_mode', False)
    if not is_quiet: print("--- 驗證配置信息 ---")

    config_map = {
        'height_config_name': (profiles.height_configs, "初始波高"),
        'depth_config_name': (profiles.depth_configs, "地形深度"),
        'rotation_rule': (updates.rotation_rule_registry, "缓冲区轮换规则"),
        'boundary_condition': (boundaries.boundary_condition_registry_cpu.keys(), "边界条件"),
        'backend': (backend_registry, "数值后端"),
        'precision': (('float32', 'float64'), "数值精度"),
    }
    for name, (registry, desc) in config_map.items():
        if params.get(name) not in registry:
            raise ValueError(f"错误: {desc}配置 '{params.get(name)}' 不存在。可用: {list(registry)}")

    for key in ('nx', 'ny'):
        if int(params[key]) < 3:
            raise ValueError(f"错误: 网格尺寸 {key}={params[key]} 必须 >= 3。")
    if int(params['tmax']) < 0:
        raise ValueError(f"错误: 迭代次数 tmax={params['tmax']} 不能为负。")

    if not is_quiet: print("配置验证通过。")

def _build_field(params: Dict[str, Any], configs: Dict[str, Any], config_name: str) -> np.ndarray:
    p = params
    f_conf = configs[p[config_name]]
    provider = profiles.field_source_registry[f_conf['provider']]

    args = {k: v(p) if callable(v) else v for k, v in f_conf.get('args', {}).items()}
    matrix = provider(nx=int(p['nx']), ny=int(p['ny']), **args)
    return np.asarray(matrix, dtype=np.float64)

def _setup_fields(params: Dict[str, Any]) -> Tuple[FieldData, FieldData]:
    is_quiet = params.get('quiet_mode', False)
    if not is_quiet: print("--- 初始化波高場與地形深度 ---")

    height = _build_field(params, profiles.height_configs, 'height_config_name')
    depth = _build_field(params, profiles.depth_configs, 'depth_config_name')

    if not is_quiet:
        print(f"  [場初始化] 波高: '{params['height_config_name']}', 最大值 {np.max(height):.4f}")
        print(f"  [場初始化] 地形: '{params['depth_config_name']}', 深度範圍 [{np.min(depth):.4f}, {np.max(depth):.4f}]")
        if np.min(depth) < 0:
            print("  警告：地形深度含有負值。")

    return FieldData(height), FieldData(depth)

def setup_simulation_environment(params: Dict[str, Any]) -> Tuple[FieldData, FieldData, Dict[str, Any]]:
    """驗證設定並建立初始波高場與地形深度場。"""
    params = params.copy()
    _validate_configs(params)
    params['nx'], params['ny'], params['tmax'] = int(params['nx']), int(params['ny']), int(params['tmax'])

    initial_field, depth_field = _setup_fields(params)

    return initial_field, depth_field, params
