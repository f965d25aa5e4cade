from typing import NamedTuple

import numpy as np

from config import DAMPING, RANDOM_SURFER_ITERATIONS, SURFER_BLOCK_SIZE, TOP_K
from errors import InvalidGraph


class SurferRank(NamedTuple):
    rank: int
    node: int
    visits: int


def random_surfer(graph, iterations=RANDOM_SURFER_ITERATIONS, damping=DAMPING, seed=None,
                  block_size=SURFER_BLOCK_SIZE) -> np.ndarray:
    """
    蒙特卡洛随机游走，返回每个节点的访问次数。

    每一步先记录当前节点的访问，再移动：没有出边的节点只能随机跳转，
    否则以概率 damping 随机跳转，以 1 - damping 沿一条随机出边走。
    随机数按块预先生成，减少逐步调用 rng 的开销。
    """
    if graph.size <= 0:
        raise InvalidGraph("random surfer needs at least one node")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be in [0, 1], got {damping}")

    n = graph.size
    rng = np.random.default_rng(seed)
    adj = [node.out_edges for node in graph.nodes]
    visits = [0] * n

    current = int(rng.integers(n))
    remaining = iterations
    while remaining > 0:
        block = min(block_size, remaining)
        coins = rng.random(block).tolist()
        jumps = rng.integers(n, size=block).tolist()
        picks = rng.random(block).tolist()
        for coin, jump, pick in zip(coins, jumps, picks):
            visits[current] += 1
            out = adj[current]
            if not out or coin < damping:
                current = jump
            else:
                current = out[int(pick * len(out))]
        remaining -= block

    return np.array(visits, dtype=np.int64)


def rank_visits(visits, top_k=TOP_K):
    """按访问次数降序取 Top-K，未访问的节点不参与排名；并列时顺序不确定"""
    visits = np.asarray(visits)
    visited = np.flatnonzero(visits > 0)
    order = visited[np.argsort(-visits[visited], kind="stable")][:max(top_k, 0)]
    return [SurferRank(rank=i + 1, node=int(idx), visits=int(visits[idx])) for i, idx in enumerate(order)]
