# shallow_wave/physics/boundaries.py

import numpy as np
from numba import njit

# ==============================================================================
# 1. 定义邻点解析逻辑
# ==============================================================================

def _reflecting_logic(k, n):
    """
    单一坐标轴上的反射规则：越界的邻点被镜像到网格内侧。
    k = 0 时 k- 取 k+1；k = n-1 时 k+ 取 k-1。
    """
    km1 = k - 1
    kp1 = k + 1
    if k == 0:
        km1 = k + 1
    if k == n - 1:
        kp1 = k - 1
    return km1, kp1

# ==============================================================================
# 2. 注册与适配
# ==============================================================================

boundary_condition_registry_cpu = {
    'reflecting': _reflecting_logic,
}

# 同一份逻辑用 Numba 编译，供 jit 内核调用
boundary_condition_registry_jit = {
    'reflecting': njit(_reflecting_logic),
}

def resolve_neighbors(i, j, nx, ny, rule='reflecting'):
    """返回 (i-, i+, j-, j+) 四个有效邻点坐标。"""
    logic = boundary_condition_registry_cpu[rule]
    im1, ip1 = logic(i, nx)
    jm1, jp1 = logic(j, ny)
    return im1, ip1, jm1, jp1

def neighbor_index_arrays(n, rule='reflecting'):
    """把规则展开成整数索引数组 (k-, k+)，供向量化后端做 gather。"""
    logic = boundary_condition_registry_cpu[rule]
    pairs = np.array([logic(k, n) for k in range(n)], dtype=np.intp)
    return pairs[:, 0].copy(), pairs[:, 1].copy()
