# shallow_wave/timer.py

import time
from contextlib import contextmanager
from typing import Dict

class SimpleTimer:
    """累計各命名區塊耗時的計時器，供主程式在結束時輸出報告。"""
    def __init__(self):
        self.totals: Dict[str, float] = {}
        self.counts: Dict[str, int] = {}
        self.start_times: Dict[str, float] = {}

    def start(self, name: str):
        self.start_times[name] = time.perf_counter()

    def stop(self, name: str) -> float:
        """停止命名計時器並累加時間；未啟動的名稱返回 0。"""
        started = self.start_times.pop(name, None)
        if started is None:
            return 0.0
        elapsed = time.perf_counter() - started
        self.totals[name] = self.totals.get(name, 0.0) + elapsed
        self.counts[name] = self.counts.get(name, 0) + 1
        return elapsed

    @contextmanager
    def record(self, name: str):
        """使用 'with' 語句自動計時；區塊拋出例外時仍會停止計時。"""
        self.start(name)
        try:
            yield
        finally:
            self.stop(name)

    def summary(self) -> Dict[str, Dict[str, float]]:
        return {
            name: {'total': total, 'count': self.counts[name], 'mean': total / self.counts[name]}
            for name, total in self.totals.items()
        }

    def report(self):
        print("\n--- 計時器分析報告 ---")
        if not self.totals:
            print("沒有任何計時記錄。")
            return

        for name, entry in sorted(self.summary().items(), key=lambda item: item[1]['total'], reverse=True):
            print(f"[{name}]: 總耗時 {entry['total']:.4f} 秒, "
                  f"{entry['count']} 次, 平均 {entry['mean']:.4f} 秒/次")
        print("------------------------\n")
