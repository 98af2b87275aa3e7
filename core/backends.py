# shallow_wave/core/backends.py

from typing import Dict, Any
from .base import Backend

# 导入具体的后端实现以便工厂函数可以使用它们
from .cpu_backend import NumpyBackend
from .jit_backend import NumbaBackend

backend_registry = {
    'numpy': NumpyBackend,
    'numba': NumbaBackend,
}

def get_backend(params: Dict[str, Any]) -> Backend:
    """
    后端工厂函数。
    根据配置创建并返回一个具体的后端实例 (NumpyBackend 或 NumbaBackend)。
    """
    name = params.get('backend', 'numpy')
    if name not in backend_registry:
        raise ValueError(f"错误: 后端 '{name}' 不存在。可用: {list(backend_registry)}")
    return backend_registry[name](params)
