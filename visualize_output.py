# shallow_wave/visualize_output.py

import numpy as np
import matplotlib.pyplot as plt
import argparse
import os

def load_diagonal_file(filepath: str) -> np.ndarray:
    """讀取對角線文字輸出，返回 (n, 3) 陣列，欄位為 i, j, value。空行被忽略。"""
    rows = []
    with open(filepath, 'r') as f:
        for line in f:
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 3:
                raise ValueError(f"錯誤：無法解析的行 '{line.rstrip()}'")
            rows.append((int(parts[0]), int(parts[1]), float(parts[2])))
    return np.array(rows, dtype=np.float64).reshape(-1, 3)

def load_output_file(filepath: str, array_name: str = None):
    """
    載入 .txt / .npy / .npz 輸出檔，返回 (data, 陣列名稱)。
    .npz 含多個陣列且未指定 array_name 時，會提示使用者選擇。
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"錯誤：找不到檔案 '{filepath}'")

    file_ext = os.path.splitext(filepath)[1]
    if file_ext == '.txt':
        return load_diagonal_file(filepath), "diagonal"
    if file_ext == '.npy':
        return np.load(filepath), "N/A (npy file)"
    if file_ext != '.npz':
        raise ValueError(f"錯誤：不支援的檔案類型 '{file_ext}'。僅支援 .txt、.npy 和 .npz。")

    with np.load(filepath) as npz_file:
        arrays = npz_file.files
        if not arrays:
            raise ValueError(f"錯誤：.npz 檔案 '{filepath}' 中不包含任何陣列。")
        if array_name is None:
            array_name = arrays[0] if len(arrays) == 1 else _prompt_array_choice(filepath, arrays)
        if array_name not in arrays:
            raise ValueError(f"錯誤：'{filepath}' 中沒有陣列 '{array_name}'。可用: {arrays}")
        return npz_file[array_name], array_name

def _prompt_array_choice(filepath, arrays):
    print(f"\n在 '{os.path.basename(filepath)}' 中找到多個陣列:")
    for i, name in enumerate(arrays):
        print(f"  [{i+1}] {name}")
    while True:
        choice = input(f"請選擇要視覺化的陣列編號 (1-{len(arrays)}): ")
        try:
            choice_idx = int(choice) - 1
        except ValueError:
            print("無效的輸入，請輸入數字。")
            continue
        if 0 <= choice_idx < len(arrays):
            return arrays[choice_idx]
        print("無效的選擇，請重新輸入。")

def visualize_file_data(filepath: str, title: str = None, cmap: str = 'coolwarm', array_name: str = None, save_path: str = None):
    """把輸出檔視覺化：對角線畫成剖面曲線，二維場畫成熱圖，三維快照取最後一幀。"""
    data, selected_array_name = load_output_file(filepath, array_name)

    print(f"\n--- 檔案資訊: {os.path.basename(filepath)} ---")
    print(f"  - 正在顯示陣列: '{selected_array_name}'")
    print(f"  - 陣列維度 (Shape): {data.shape}")
    print(f"  - 資料類型 (dtype): {data.dtype}")

    fig, ax = plt.subplots(figsize=(10, 8))
    plot_title = title if title else os.path.basename(filepath)

    if selected_array_name == "diagonal":
        ax.plot(data[:, 0], data[:, 2], 'o-', markersize=3)
        ax.set_xlabel("i = j")
        ax.set_ylabel("波高 u")
        ax.grid(True)
    else:
        if data.ndim == 3:
            print(f"  - 快照序列共 {data.shape[0]} 幀，顯示最後一幀")
            data = data[-1]
        print(f"  - 最大值 (Max): {np.max(data):.4f}")
        print(f"  - 最小值 (Min): {np.min(data):.4f}")
        im = ax.imshow(data.T, cmap=cmap, origin='lower', aspect='equal')
        fig.colorbar(im, ax=ax)
        ax.set_xlabel("i")
        ax.set_ylabel("j")
        plot_title += f" - [{selected_array_name}]"

    ax.set_title(plot_title, fontsize=16)
    fig.tight_layout()

    if save_path:
        output_dir = os.path.dirname(save_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        fig.savefig(save_path, dpi=150)
        plt.close(fig)
        print(f"圖像已儲存至: {save_path}")
    else:
        plt.show()

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="視覺化淺水波模擬的對角線輸出 (.txt) 或導出的場 (.npy/.npz)。",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("filepath", type=str, help="要視覺化的 .txt、.npy 或 .npz 檔案路徑。")
    parser.add_argument("--array", type=str, default=None, help=".npz 中要顯示的陣列名稱。")
    parser.add_argument("--title", type=str, default=None, help="圖像的自訂標題。")
    parser.add_argument("--cmap", type=str, default="coolwarm", help="Matplotlib 的色彩對映。")
    parser.add_argument("--save", type=str, default=None, help="提供路徑以儲存圖像。")

    args = parser.parse_args(argv)
    visualize_file_data(args.filepath, args.title, args.cmap, args.array, args.save)

if __name__ == "__main__":
    main()
