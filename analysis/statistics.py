# shallow_wave/analysis/statistics.py

import numpy as np
from typing import Dict, Any

class StatisticsManager:
    """负责计算时间推进过程中的波高场统计量。"""
    def __init__(self, params: Dict[str, Any], xp):
        self.params = params
        self.xp = xp

    def calculate_step_stats(self, u_now) -> Dict[str, float]:
        u = self.xp.asarray(u_now)
        finite = bool(self.xp.isfinite(u).all())
        stats = {
            "max_abs_height": float(self.xp.max(self.xp.abs(u))) if finite else np.inf,
            "mean_height": float(self.xp.mean(u)) if finite else np.nan,
            "l2_norm": float(self.xp.sqrt(self.xp.sum(u * u))) if finite else np.inf,
            "corner_height": float(u[0, 0]),
            "is_finite": finite,
        }
        return stats

    def format_postfix(self, stats: Dict[str, float]) -> Dict[str, str]:
        """转换成 tqdm 进度条后缀显示用的短字串。"""
        return {
            "max|u|": f"{stats['max_abs_height']:.3e}",
            "u(0,0)": f"{stats['corner_height']:.3e}",
        }
