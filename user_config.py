# shallow_wave/user_config.py

# ==============================================================================
# 用戶常用配置 (User Configuration)
# 您可以在此處快速調整模擬的關鍵參數
# ==============================================================================

# --- 網格尺寸 (兩者皆須 >= 3) ---
nx = 71
ny = 71

# --- 時間推進 ---
tmax = 300

# --- Courant 數 rx = dt/dx, ry = dt/dy (不做穩定性檢查) ---
rx = 0.25
ry = 0.25

# --- 鐘形初始波高與倒鐘形地形的參數 ---
# 中心 (0, 0) 位於網格角落，這是參考設定的一部分。
amplitude = 1.0
sigma_x = 1.0
sigma_y = 1.0
x_center = 0.0
y_center = 0.0

# --- 數值後端 ---
# 'numpy': 向量化；'numba': 編譯後的逐點迴圈。
backend = 'numpy'

# --- 三代緩衝區的輪換方式 ---
# 'relabel': 交換名稱 (較快)；'copy': 整塊複製 (與參考實作相同)。
rotation_rule = 'relabel'

# --- 輸出 ---
output_path = 'wave_diagonal.txt'
enable_export = False
enable_plots = False

# 每隔多少步記錄一次整場快照 (0 = 不記錄)
snapshot_interval = 0
