from typing import NamedTuple

import numpy as np
import scipy.sparse as sp

from config import DAMPING, PAGERANK_ITERATIONS, TOP_K
from errors import InvalidGraph
from linalg import mat_add_row_vec, mat_vec, vec_add_scalar, vec_add_vec, vec_mul_vec


class PageRankResult(NamedTuple):
    rank: int
    node: int
    score: float


def _check_graph(graph):
    if graph.size <= 0:
        raise InvalidGraph("pagerank needs at least one node")


def _check_args(damping, iterations):
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be in [0, 1], got {damping}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")


def transition_matrix(graph, factor, sparse=False):
    """
    转移矩阵 A[v, u] = factor / out_degree(u)，对每条边 u -> v。
    重边只赋值一次，不累加。
    """
    entries = {}
    for u, v in graph.edges():
        entries[v, u] = factor / graph.out_degree(u)

    n = graph.size
    rows = np.fromiter((v for v, _ in entries), dtype=np.intp, count=len(entries))
    cols = np.fromiter((u for _, u in entries), dtype=np.intp, count=len(entries))
    vals = np.fromiter(entries.values(), dtype=np.float64, count=len(entries))
    if sparse:
        return sp.csr_matrix((vals, (rows, cols)), shape=(n, n), dtype=np.float64)

    A = np.zeros((n, n), dtype=np.float64)
    A[rows, cols] = vals
    return A


def dangling_vector(graph, factor):
    return graph.dangling_mask() * factor


def pagerank(graph, damping=DAMPING, iterations=PAGERANK_ITERATIONS, sparse=False) -> np.ndarray:
    """
    固定次数的幂迭代：
        x_{k+1} = (1 - m)A x_k + (1 - m)D x_k + (m / n)1
    D 为入边为空的节点掩码，D x_k 的质量均匀分给所有节点。
    不做收敛判断。
    """
    _check_graph(graph)
    _check_args(damping, iterations)
    n = graph.size
    factor = 1.0 - damping

    A = transition_matrix(graph, factor, sparse=sparse)
    D = dangling_vector(graph, factor)
    jump = damping / n

    # 两个排名向量轮换使用，迭代中不再分配新的排名向量
    xk = np.full(n, 1.0 / n, dtype=np.float64)
    xk_next = np.zeros(n, dtype=np.float64)
    edge_buf = np.zeros(n, dtype=np.float64)
    dangling_buf = np.zeros(n, dtype=np.float64)

    for _ in range(iterations):
        # mat_vec 是累加的，先清零
        edge_buf.fill(0.0)
        mat_vec(A, xk, edge_buf)

        vec_mul_vec(D, xk, dangling_buf)
        dangling_buf.fill(dangling_buf.sum())

        vec_add_vec(edge_buf, dangling_buf, xk_next)
        vec_add_scalar(xk_next, jump, xk_next)

        xk, xk_next = xk_next, xk

    return xk


def google_matrix(graph, damping=DAMPING):
    """
    标准 Google 矩阵 M = (1 - m)(A + 死节点列 1/n) + m/n。
    这里的死节点是没有出边的节点，M 的每一列之和为 1。
    """
    _check_graph(graph)
    _check_args(damping, 0)
    n = graph.size
    # 标准做法：重边按条数累加，每列之和为 1
    A = np.zeros((n, n), dtype=np.float64)
    for u, v in graph.edges():
        A[v, u] += 1.0 / graph.out_degree(u)
    for u, node in enumerate(graph.nodes):
        if node.out_degree == 0:
            A[:, u] = 1.0 / n
    A *= 1.0 - damping

    teleport = np.full(n, damping / n, dtype=np.float64)
    return mat_add_row_vec(A, teleport, A)


def pagerank_google(graph, damping=DAMPING, iterations=PAGERANK_ITERATIONS) -> np.ndarray:
    """在 Google 矩阵上做幂迭代，用于和 pagerank() 对照"""
    _check_args(damping, iterations)
    M = google_matrix(graph, damping)
    n = graph.size
    xk = np.full(n, 1.0 / n, dtype=np.float64)
    xk_next = np.zeros(n, dtype=np.float64)
    for _ in range(iterations):
        xk_next.fill(0.0)
        mat_vec(M, xk, xk_next)
        xk, xk_next = xk_next, xk
    return xk


def rank_scores(scores, top_k=TOP_K):
    """Top-K 选择：先 argpartition 再对候选排序"""
    scores = np.asarray(scores)
    n = len(scores)
    k = min(top_k, n)
    if k <= 0:
        return []
    if k < n:
        top_indices = np.argpartition(-scores, k - 1)[:k]
    else:
        top_indices = np.arange(n)
    top_indices = top_indices[np.argsort(-scores[top_indices], kind="stable")]
    return [PageRankResult(rank=i + 1, node=int(idx), score=float(scores[idx])) for i, idx in enumerate(top_indices)]
