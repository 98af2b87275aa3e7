# shallow_wave/analysis/io.py

import os
import numpy as np
from typing import Dict, Any, List, Tuple

def extract_diagonal(field: np.ndarray) -> List[Tuple[int, int, float]]:
    """取出 i == j 的對角線格點，按 i 遞增排列。"""
    n = min(field.shape)
    return [(i, i, float(field[i, i])) for i in range(n)]

def format_diagonal(field: np.ndarray) -> str:
    """
    把最終波高場的對角線序列化為文字：每行 "<i> <j> <value>"，
    value 以最短可還原的 repr 輸出，最後附加兩個空行。
    """
    lines = [f"{i} {j} {value!r}\n" for i, j, value in extract_diagonal(field)]
    return "".join(lines) + "\n\n"

class HistoryManager:
    """管理時間推進過程中的整場快照。"""
    def __init__(self, params: Dict[str, Any]):
        self.snapshot_interval = int(params.get('snapshot_interval', 0))
        self.simulation_history: List[Dict[str, Any]] = []

    def should_snapshot(self, step: int, total_steps: int) -> bool:
        """判斷當前步是否需要記錄快照；最後一步總是記錄。"""
        if self.snapshot_interval <= 0:
            return False
        return step % self.snapshot_interval == 0 or step == total_steps

    def record_snapshot(self, step: int, field: np.ndarray, stats: Dict[str, float] = None):
        self.simulation_history.append({'step': step, 'field': field.copy(), 'stats': stats or {}})

    def get_history(self) -> List[Dict[str, Any]]:
        return self.simulation_history

    def clear(self):
        self.simulation_history = []

class ExportManager:
    """負責把模擬結果寫到磁碟。"""
    def __init__(self, params: Dict[str, Any]):
        self.is_enabled = params.get('enable_export', False)
        self.export_path = params.get('default_export_path', 'exported_data')
        self.is_quiet = params.get('quiet_mode', False)
        if self.is_enabled:
            if not os.path.isabs(self.export_path):
                self.export_path = os.path.join(os.getcwd(), self.export_path)
            os.makedirs(self.export_path, exist_ok=True)
            if not self.is_quiet:
                print(f"  [數據導出] 功能已啟用。數據將被保存到: '{self.export_path}'")

    def write_diagonal(self, field: np.ndarray, path: str) -> str:
        """寫出最終場的對角線文字檔，返回檔案路徑。"""
        output_dir = os.path.dirname(path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(path, 'w') as f:
            f.write(format_diagonal(field))
        if not self.is_quiet:
            print(f"  [輸出] 對角線波高已寫入 '{path}'。")
        return path

    def export_fields(self, u_now: np.ndarray, depth: np.ndarray, history: List[Dict[str, Any]] = None):
        """將最終波高、地形與快照序列導出為 .npz 文件。"""
        if not self.is_enabled:
            return None

        file_path = os.path.join(self.export_path, "final_fields.npz")
        data_to_save = {'u_now': np.asarray(u_now), 'depth': np.asarray(depth)}
        if history:
            data_to_save['history_steps'] = np.array([h['step'] for h in history])
            data_to_save['history_fields'] = np.stack([h['field'] for h in history])

        try:
            np.savez_compressed(file_path, **data_to_save)
        except IOError as e:
            print(f"警告：寫入文件 {file_path} 失敗: {e}")
            return None
        if not self.is_quiet:
            print(f"  [數據導出] 已保存 '{file_path}'。")
        return file_path
