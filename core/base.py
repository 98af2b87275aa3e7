# shallow_wave/core/base.py

from abc import ABC, abstractmethod
from typing import Dict, Any
import numpy as np

class Backend(ABC):
    """
    模板更新后端抽象基类。
    它定义了所有具体后端（NumPy 向量化、Numba 循环）必须实现的通用接口，
    并在 update() 中统一检查输出缓冲区的别名。
    """
    def __init__(self, params: Dict[str, Any]):
        self.params = params
        self.xp = None      # 将由子类设置为 numpy
        self.dtype = None   # 将由子类设置为 float32 或 float64
        self._setup_backend_specifics()

    @abstractmethod
    def _setup_backend_specifics(self):
        """设置后端特定的属性，如 self.xp 和 self.dtype。"""
        pass

    @abstractmethod
    def setup_computation(self, nx: int, ny: int):
        """为给定网格准备邻点索引或编译计算内核。"""
        pass

    @abstractmethod
    def compute_delta(self, u_now, depth, rx: float, ry: float):
        """返回整场的深度加权空间差分项 Δ。"""
        pass

    @abstractmethod
    def _apply_update(self, u_new, u_now, u_old, depth, a, b, c, rx, ry):
        """把 a*2*now - b*old + c*Δ 写入 u_new 的全部格点。"""
        pass

    def update(self, u_new, u_now, u_old, depth, a: float, b: float, c: float, rx: float, ry: float):
        """计算新一代波高场并写入 u_new，返回 u_new。"""
        if np.shares_memory(u_new, u_now):
            raise ValueError("错误：u_new 与 u_now 共用内存，更新必须读旧写新。")
        if u_new.shape != u_now.shape or u_old.shape != u_now.shape or depth.shape != u_now.shape:
            raise ValueError(f"错误：场的形状不一致: new={u_new.shape}, now={u_now.shape}, "
                             f"old={u_old.shape}, depth={depth.shape}")
        self._apply_update(u_new, u_now, u_old, depth, a, b, c, rx, ry)
        return u_new
