# shallow_wave/physics/updates.py

# 更新方程 new = a*2*now - b*old + c*Δ 的两组系数
BOOTSTRAP_COEFFS = (0.5, 0.0, 0.5)
REGULAR_COEFFS = (1.0, 1.0, 1.0)

def relabel_rotation(generations):
    """规则一：交换三个缓冲区的名称，不复制数据。"""
    generations.old, generations.now, generations.new = generations.now, generations.new, generations.old

def copy_rotation(generations):
    """规则二：整块复制，old <- now，now <- new。"""
    generations.old[...] = generations.now
    generations.now[...] = generations.new

rotation_rule_registry = {
    'relabel': relabel_rotation,
    'copy': copy_rotation,
}
