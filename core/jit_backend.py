# shallow_wave/core/jit_backend.py

import numpy as np

from .base import Backend
from . import jit_kernels

class NumbaBackend(Backend):
    """使用 Numba 编译的逐点循环内核在 CPU 上执行模板更新的后端。"""
    def _setup_backend_specifics(self):
        self.xp = np
        self.dtype = np.float64 if self.params.get('precision', 'float64') == 'float64' else np.float32

    def setup_computation(self, nx: int, ny: int):
        if not self.params.get('quiet_mode', False):
            print("  [Backend Setup] Compiling Numba stencil kernels...")
        self._compile_kernels()

    def _compile_kernels(self):
        """建立内核；真正的编译发生在第一次调用时。"""
        rule = self.params.get('boundary_condition', 'reflecting')
        self.update_kernel = jit_kernels.create_update_kernel(rule)
        self.delta_kernel = jit_kernels.create_delta_kernel(rule)

    def compute_delta(self, u_now, depth, rx, ry):
        out = np.empty_like(u_now)
        self.delta_kernel(out, u_now, depth, float(rx), float(ry))
        return out

    def _apply_update(self, u_new, u_now, u_old, depth, a, b, c, rx, ry):
        self.update_kernel(u_new, u_now, u_old, depth, float(a), float(b), float(c), float(rx), float(ry))
