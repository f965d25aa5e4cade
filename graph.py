import numpy as np

from errors import GraphFormatError, IndexOutOfRange, InvalidGraph


class Node:
    __slots__ = ("out_edges", "in_edges", "out_degree")

    def __init__(self):
        self.out_edges = []
        self.in_edges = []
        self.out_degree = 0


class Graph:
    """有向图：正向/反向邻接表 + 出度计数，构建完成后只读"""

    def __init__(self, size):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidGraph(f"graph size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidGraph(f"graph size must be positive, got {size}")
        self.size = int(size)
        self.nodes = [Node() for _ in range(self.size)]
        self.edge_count = 0

    def __len__(self):
        return self.size

    def _check(self, node):
        if not 0 <= node < self.size:
            raise IndexOutOfRange(f"node {node} out of range [0, {self.size})")

    def add_edge(self, src, dst):
        self._check(src)
        self._check(dst)
        self.nodes[src].out_edges.append(dst)
        self.nodes[dst].in_edges.append(src)
        self.nodes[src].out_degree += 1
        self.edge_count += 1

    def out_degree(self, node):
        return self.nodes[node].out_degree

    def edges(self):
        for src, node in enumerate(self.nodes):
            for dst in node.out_edges:
                yield src, dst

    def dangling_mask(self) -> np.ndarray:
        """
        入边为空的节点记为 1/n，其余为 0。
        注意这里按入边判断，随机游走的死节点按出边判断，两者不同。
        """
        mask = np.zeros(self.size, dtype=np.float64)
        val = 1.0 / self.size
        for i, node in enumerate(self.nodes):
            if not node.in_edges:
                mask[i] = val
        return mask


def load_graph(filename) -> Graph:
    """读取带节点数表头的图文件：首行为 n，之后每行若干对 `from to`"""
    with open(filename, "r", encoding="utf-8") as f:
        header = f.readline()
        try:
            n = int(header.strip())
        except ValueError:
            raise GraphFormatError(f"{filename}:1: invalid node count {header.strip()!r}") from None
        g = Graph(n)

        for lineno, line in enumerate(f, start=2):
            numbers = line.split()
            if not numbers:
                continue
            if len(numbers) % 2 != 0:
                raise GraphFormatError(f"{filename}:{lineno}: odd number of fields: {line.strip()!r}")
            try:
                ids = list(map(int, numbers))
            except ValueError:
                raise GraphFormatError(f"{filename}:{lineno}: invalid number: {line.strip()!r}") from None
            for i in range(0, len(ids), 2):
                g.add_edge(ids[i], ids[i + 1])
    return g


def load_edge_list(filename) -> Graph:
    """纯边表（无表头），节点数取最大编号 + 1"""
    try:
        data = np.loadtxt(filename, dtype=np.int64, ndmin=2)
    except ValueError as e:
        raise GraphFormatError(f"{filename}: {e}") from None
    if data.size == 0:
        raise GraphFormatError(f"{filename}: no edges")
    if data.shape[1] != 2:
        raise GraphFormatError(f"{filename}: expected 2 columns, got {data.shape[1]}")
    if data.min() < 0:
        raise GraphFormatError(f"{filename}: negative node id")

    g = Graph(int(data.max()) + 1)
    for u, v in data.tolist():
        g.add_edge(u, v)
    return g
