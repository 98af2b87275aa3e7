# shallow_wave/simulation.py

import numpy as np
from typing import Dict, Any, Optional
from tqdm import tqdm

from core.backends import get_backend
from core.field import FieldData, WaveGenerations
from analysis.statistics import StatisticsManager
from analysis.io import HistoryManager, ExportManager
from analysis.visualization import VisualizationManager
from physics.updates import rotation_rule_registry, BOOTSTRAP_COEFFS, REGULAR_COEFFS
from timer import SimpleTimer

class Simulation:
    """
    蛙跳法時間推進器。
    狀態依序為 uninitialized -> bootstrapped -> running -> done。
    """
    UNINITIALIZED = 'uninitialized'
    BOOTSTRAPPED = 'bootstrapped'
    RUNNING = 'running'
    DONE = 'done'

    def __init__(self, params: Dict[str, Any], initial_field: FieldData, depth_field: FieldData):
        self.params = params
        self.is_quiet = self.params.get('quiet_mode', False)
        self.initial_field = initial_field
        self.depth_field = depth_field

        if not self.is_quiet: print("\n--- 初始化核心組件 ---")
        self.backend = get_backend(self.params)
        self.xp = self.backend.xp

        self.nx, self.ny = initial_field.nx, initial_field.ny
        self.backend.setup_computation(self.nx, self.ny)

        self.depth = self.xp.asarray(depth_field.get_field_matrix(), dtype=self.backend.dtype)
        self.generations = WaveGenerations(self.nx, self.ny, dtype=self.backend.dtype)
        self.rotate = rotation_rule_registry[self.params.get('rotation_rule', 'relabel')]

        self.rx = float(self.params['rx'])
        self.ry = float(self.params['ry'])

        self.stats_manager = StatisticsManager(self.params, self.xp)
        self.history_manager = HistoryManager(self.params)
        self.export_manager = ExportManager(self.params)
        self.viz_manager = VisualizationManager(self.params, depth_field, self.xp)

        self.timer = SimpleTimer()
        self.state = self.UNINITIALIZED
        self.steps_done = 0

    def set_timer(self, timer):
        """從外部接收計時器物件。"""
        self.timer = timer

    @property
    def current_field(self) -> np.ndarray:
        return self.generations.now

    @property
    def previous_field(self) -> np.ndarray:
        return self.generations.old

    def bootstrap(self):
        """
        以初始波高填入 now，並用自參照的更新 (previous = current，
        係數 0.5, 0, 0.5) 合成 old，因為蛙跳遞推需要兩代初值。
        """
        g = self.generations
        g.now[...] = self.initial_field.get_field_matrix()
        a, b, c = BOOTSTRAP_COEFFS
        self.backend.update(g.old, g.now, g.now, self.depth, a, b, c, self.rx, self.ry)
        self.steps_done = 0
        self.history_manager.clear()
        self.state = self.BOOTSTRAPPED

    def step(self):
        """
        推進一步：由 (now, old) 計算 new，然後輪換三代緩衝區。
        注意：之後呼叫 run() 會重新 bootstrap，手動推進的步數不會保留。
        """
        if self.state == self.UNINITIALIZED:
            self.bootstrap()
        g = self.generations
        a, b, c = REGULAR_COEFFS
        self.backend.update(g.new, g.now, g.old, self.depth, a, b, c, self.rx, self.ry)
        self.rotate(g)
        self.steps_done += 1
        self.state = self.RUNNING
        return g.now

    def run(self, num_steps: Optional[int] = None) -> np.ndarray:
        """
        執行固定步數的時間推進，返回最終波高場。
        num_steps 為 None 時使用 tmax；除剛 bootstrap 之外的狀態都會先重新 bootstrap。
        """
        p = self.params
        total_steps = int(p['tmax']) if num_steps is None else int(num_steps)
        if total_steps < 0:
            raise ValueError(f"錯誤：推進步數 {total_steps} 不能為負。")

        if self.state != self.BOOTSTRAPPED:
            with self.timer.record("初始化 (bootstrap)"):
                self.bootstrap()

        stats_interval = max(1, int(p.get('stats_interval', 25)))
        progress_bar = tqdm(range(1, total_steps + 1), desc="  時間推進", leave=False, disable=self.is_quiet)

        with self.timer.record("時間推進 (leapfrog)"):
            for t in progress_bar:
                self.step()

                is_snapshot = self.history_manager.should_snapshot(t, total_steps)
                if is_snapshot or t % stats_interval == 0:
                    stats = self.stats_manager.calculate_step_stats(self.generations.now)
                    progress_bar.set_postfix(self.stats_manager.format_postfix(stats))
                    if is_snapshot:
                        self.history_manager.record_snapshot(t, self.generations.now, stats)

        self.state = self.DONE

        if p.get('check_finite', True):
            self.check_finite()

        return self.current_field

    def check_finite(self):
        """事後檢查：若最終場含 NaN/Inf 則拒絕結果。"""
        u = self.generations.now
        if not self.xp.isfinite(u).all():
            bad = int(self.xp.count_nonzero(~self.xp.isfinite(u)))
            raise FloatingPointError(
                f"錯誤：第 {self.steps_done} 步後波高場出現 {bad} 個非有限值，"
                f"請檢查 Courant 數 rx={self.rx}, ry={self.ry}。")

    def reset(self):
        """重設三代緩衝區，回到 uninitialized 狀態以開始新的推進。"""
        for buf in self.generations.buffers():
            buf[...] = 0.0
        self.history_manager.clear()
        self.steps_done = 0
        self.state = self.UNINITIALIZED

    def export_results(self) -> Dict[str, Any]:
        """寫出對角線文字檔，並視設定導出 .npz 與圖像。"""
        if self.state != self.DONE:
            raise RuntimeError(f"錯誤：模擬尚未完成 (狀態: {self.state})，無法輸出結果。")

        u_now = self.current_field
        history = self.history_manager.get_history()
        results = {}
        with self.timer.record("結果輸出"):
            results['output_path'] = self.export_manager.write_diagonal(u_now, self.params['output_path'])
            results['export_path'] = self.export_manager.export_fields(u_now, self.depth, history)
            results['report_plot'] = self.viz_manager.plot_final_report(u_now, self.initial_field.get_field_matrix())
            results['history_plot'] = self.viz_manager.plot_history(history)
        return results
