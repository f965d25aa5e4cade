DAMPING = 0.15  # 随机跳转概率 m
RANDOM_SURFER_ITERATIONS = 10_000_000
PAGERANK_ITERATIONS = 100
TOP_K = 10

# 随机游走每块预先生成的随机数个数
SURFER_BLOCK_SIZE = 65536

DATA_FILE = "Data.txt"
RES_FILE = "Res.txt"
