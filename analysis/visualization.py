# shallow_wave/analysis/visualization.py

import os
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec
from typing import Dict, Any, List

from .io import extract_diagonal

class VisualizationManager:
    """負責所有與可視化相關的編排工作。"""
    def __init__(self, params: Dict[str, Any], depth_field_obj, xp):
        self.params = params
        self.depth_field_obj = depth_field_obj
        self.xp = xp
        self.is_enabled = params.get('enable_plots', False)
        self.output_path = self.params.get('plot_output_path', '.')
        if self.is_enabled:
            os.makedirs(self.output_path, exist_ok=True)

    def plot_final_report(self, u_now, initial_height=None):
        """繪製最終波高、地形深度與對角線剖面，返回圖檔路徑。"""
        if not self.is_enabled:
            return None

        fig = plt.figure(figsize=(18, 12))
        self._draw_final_plot(fig, np.asarray(u_now), initial_height)
        file_path = os.path.join(self.output_path, "final_report.png")
        fig.savefig(file_path, dpi=100, bbox_inches='tight')
        plt.close(fig)
        return file_path

    def plot_history(self, history: List[Dict[str, Any]]):
        stats_history = [s['stats'] for s in history if s.get('stats')]
        if not self.is_enabled or not stats_history:
            return None

        if not self.params.get('quiet_mode', False):
            print("\n正在生成波高演化統計圖...")
        steps = [s['step'] for s in history if s.get('stats')]

        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6), sharex=True)
        fig.suptitle('波高場演化統計', fontsize=16)

        ax1.plot(steps, [s['max_abs_height'] for s in stats_history], 'o-', label='max |u|')
        ax1.plot(steps, [s['corner_height'] for s in stats_history], 's-', label='u(0, 0)')
        ax1.set_xlabel('時間步'); ax1.set_ylabel('波高'); ax1.legend(); ax1.grid(True)

        ax2.plot(steps, [s['l2_norm'] for s in stats_history], 'd-', color='purple', label='||u||₂')
        ax2.set_xlabel('時間步'); ax2.set_ylabel('L2 範數'); ax2.legend(); ax2.grid(True)

        fig.tight_layout(rect=[0, 0.03, 1, 0.95])
        file_path = os.path.join(self.output_path, "history_statistics.png")
        fig.savefig(file_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return file_path

    def _draw_final_plot(self, fig, u_now, initial_height):
        depth = self.depth_field_obj.get_field_matrix()
        fig.suptitle(f'第 {self.params.get("tmax", 0)} 步波高場綜合報告', fontsize=22, y=0.97)
        gs = gridspec.GridSpec(2, 2, figure=fig, wspace=0.3, hspace=0.35)

        # Panel 1: 最終波高
        ax_u = fig.add_subplot(gs[0, 0])
        im_u = ax_u.imshow(u_now.T, cmap='coolwarm', origin='lower', aspect='equal')
        ax_u.set_title('最終波高 u(i, j)'); ax_u.set_xlabel('i'); ax_u.set_ylabel('j')
        fig.colorbar(im_u, ax=ax_u).set_label('波高')

        # Panel 2: 地形深度
        ax_d = fig.add_subplot(gs[0, 1])
        im_d = ax_d.imshow(depth.T, cmap='viridis', origin='lower', aspect='equal')
        ax_d.set_title('地形深度 λ(i, j)'); ax_d.set_xlabel('i'); ax_d.set_ylabel('j')
        fig.colorbar(im_d, ax=ax_d).set_label('深度')

        # Panel 3: 對角線剖面
        ax_diag = fig.add_subplot(gs[1, :])
        diag = extract_diagonal(u_now)
        ax_diag.plot([d[0] for d in diag], [d[2] for d in diag], '-', label='最終')
        if initial_height is not None:
            diag0 = extract_diagonal(np.asarray(initial_height))
            ax_diag.plot([d[0] for d in diag0], [d[2] for d in diag0], '--', alpha=0.6, label='初始')
        ax_diag.set_title('對角線 i = j 上的波高'); ax_diag.set_xlabel('i'); ax_diag.set_ylabel('u')
        ax_diag.legend(); ax_diag.grid(True)
