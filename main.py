# shallow_wave/main.py

import sys
import os
import argparse
from timer import SimpleTimer

# --- 專案路徑設定 ---
_current_file_dir = os.path.dirname(os.path.abspath(__file__))
if _current_file_dir not in sys.path:
    sys.path.insert(0, _current_file_dir)

# --- 匯入模組 ---
from config import get_config
from simulation import Simulation
from simulation_setup import setup_simulation_environment

def run_simulation(params: dict) -> dict:
    """建立場、執行蛙跳時間推進並輸出最終對角線。"""
    is_quiet = params.get('quiet_mode', False)
    if not is_quiet:
        print(f"\n--- 淺水波模擬任務 ---")
        print(f"任務配置: {params['nx']} x {params['ny']} 網格, {params['tmax']} 步, "
              f"rx={params['rx']}, ry={params['ry']}, 後端 '{params['backend']}'。")

    timer = SimpleTimer()
    timer.start("總任務")

    with timer.record("場初始化與後端建立"):
        initial_field, depth_field, updated_params = setup_simulation_environment(params)
        sim = Simulation(updated_params, initial_field, depth_field)
        sim.set_timer(timer)

    final_field = sim.run()
    results = sim.export_results()
    results['final_field'] = final_field

    timer.stop("總任務")
    if not is_quiet:
        print(f"\n模擬完畢！u(0,0) = {final_field[0, 0]!r}")
        timer.report()
    return results

def build_parser(base_params: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="以蛙跳有限差分法模擬變深度地形上的二維淺水波。",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('--mode', type=str, default='run', choices=['run'], help='選擇程式運行的模式 (目前僅支援 "run")')

    # 動態地為所有可配置參數添加命令行接口
    for key, value in base_params.items():
        arg_name = f'--{key.replace("_", "-")}'
        if isinstance(value, bool):
            parser.add_argument(arg_name, action=argparse.BooleanOptionalAction, default=None)
        else:
            parser.add_argument(arg_name, type=type(value), default=None, help=f'覆寫 {key} 參數 (預設: {value})')
    return parser

def main(argv=None):
    """程式主入口，解析命令行參數並啟動模擬。"""
    base_params = get_config()
    parser = build_parser(base_params)
    args = parser.parse_args(argv)

    # 將命令行參數覆寫到基礎設定上
    final_params = base_params.copy()
    for key, value in vars(args).items():
        if value is not None and key != 'mode':
            final_params[key] = value

    # --- 打印所有生效的參數配置，方便追溯 ---
    if not final_params.get('quiet_mode', False):
        print("\n" + "="*60)
        print("【運行配置報告 (Runtime Configuration Report)】")
        print(f"運行模式 (Mode): {args.mode}")
        print("-" * 60)
        for key in sorted(final_params.keys()):
            print(f"{key:<35}: {final_params[key]}")
        print("="*60 + "\n")

    if args.mode == 'run':
        try:
            run_simulation(final_params)
        except (ValueError, FileNotFoundError, FloatingPointError) as e:
            print(e)
            sys.exit(1)
    else:
        print(f"錯誤：未知的模式 '{args.mode}'。")
        sys.exit(1)

if __name__ == "__main__":
    main()
