# shallow_wave/core/field.py

import numpy as np

class FieldData:
    """封装一个二维场的通用数据结构。索引惯例为 [i, j]，形状 (nx, ny)。"""
    def __init__(self, field_matrix: np.ndarray):
        self.field_matrix = field_matrix
        self.nx, self.ny = field_matrix.shape

    def get_field_matrix(self) -> np.ndarray:
        return self.field_matrix

class WaveGenerations:
    """
    持有波高场的三代缓冲区：old (t-1)、now (t)、new (t+1)。
    三块内存只在构造时分配一次，之后通过轮换规则交换名称或复制内容。
    """
    def __init__(self, nx: int, ny: int, dtype=np.float64):
        self.nx = nx
        self.ny = ny
        self.old = np.zeros((nx, ny), dtype=dtype)
        self.now = np.zeros((nx, ny), dtype=dtype)
        self.new = np.zeros((nx, ny), dtype=dtype)

    def buffers(self):
        return self.old, self.now, self.new
