# shallow_wave/core/jit_kernels.py

from numba import njit
from physics import boundaries

# ==============================================================================
#                      Numba Device-style Functions and Kernels
# ==============================================================================

@njit
def delta_u(rx, ry, lam, u_now, i, j, im1, ip1, jm1, jp1):
    """单个格点的深度加权差分项 Δ(i, j)。"""
    return (rx ** 2 * ((0.5 * (lam[ip1, j] + lam[i, j])) * (u_now[ip1, j] - u_now[i, j])
                       - (0.5 * (lam[i, j] + lam[im1, j])) * (u_now[i, j] - u_now[im1, j]))
            + ry ** 2 * ((0.5 * (lam[i, jp1] + lam[i, j])) * (u_now[i, jp1] - u_now[i, j])
                         - (0.5 * (lam[i, j] + lam[i, jm1])) * (u_now[i, j] - u_now[i, jm1])))

def create_update_kernel(boundary_name='reflecting'):
    """工厂函数，为指定的邻点规则创建整场更新内核。"""
    resolve = boundaries.boundary_condition_registry_jit[boundary_name]

    @njit
    def update_kernel(u_new, u_now, u_old, lam, a, b, c, rx, ry):
        nx, ny = u_now.shape
        for j in range(ny):
            jm1, jp1 = resolve(j, ny)
            for i in range(nx):
                im1, ip1 = resolve(i, nx)
                u_new[i, j] = a * 2.0 * u_now[i, j] - b * u_old[i, j] + c * delta_u(rx, ry, lam, u_now, i, j, im1, ip1, jm1, jp1)

    return update_kernel

def create_delta_kernel(boundary_name='reflecting'):
    """工厂函数，创建只计算 Δ 场的内核。"""
    resolve = boundaries.boundary_condition_registry_jit[boundary_name]

    @njit
    def delta_kernel(out, u_now, lam, rx, ry):
        nx, ny = u_now.shape
        for j in range(ny):
            jm1, jp1 = resolve(j, ny)
            for i in range(nx):
                im1, ip1 = resolve(i, nx)
                out[i, j] = delta_u(rx, ry, lam, u_now, i, j, im1, ip1, jm1, jp1)

    return delta_kernel
