# shallow_wave/core/cpu_backend.py

import numpy as np

from .base import Backend
from physics import boundaries

class NumpyBackend(Backend):
    """使用 NumPy 向量化 gather 在 CPU 上执行模板更新的后端。"""
    def _setup_backend_specifics(self):
        self.xp = np
        self.dtype = np.float64 if self.params.get('precision', 'float64') == 'float64' else np.float32

    def setup_computation(self, nx: int, ny: int):
        if not self.params.get('quiet_mode', False):
            print("  [Backend Setup] Initializing NumPy stencil backend...")
        rule = self.params.get('boundary_condition', 'reflecting')
        self.im1, self.ip1 = boundaries.neighbor_index_arrays(nx, rule)
        self.jm1, self.jp1 = boundaries.neighbor_index_arrays(ny, rule)

    def compute_delta(self, u_now, depth, rx, ry):
        lam, u = depth, u_now
        im1, ip1, jm1, jp1 = self.im1, self.ip1, self.jm1, self.jp1

        x_term = ((0.5 * (lam[ip1, :] + lam)) * (u[ip1, :] - u)
                  - (0.5 * (lam + lam[im1, :])) * (u - u[im1, :]))
        y_term = ((0.5 * (lam[:, jp1] + lam)) * (u[:, jp1] - u)
                  - (0.5 * (lam + lam[:, jm1])) * (u - u[:, jm1]))

        return rx ** 2 * x_term + ry ** 2 * y_term

    def _apply_update(self, u_new, u_now, u_old, depth, a, b, c, rx, ry):
        # 右侧先完整求值再写入，u_new 与 u_old 同址时也安全
        u_new[...] = a * 2 * u_now - b * u_old + c * self.compute_delta(u_now, depth, rx, ry)
