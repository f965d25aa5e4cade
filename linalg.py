"""
稠密向量/矩阵基本运算。

所有函数都把结果写入调用方提供的缓冲区并返回它。
mat_vec 计算 A @ x 时仍会产生一个临时向量。
"""
import numpy as np

from errors import IndexOutOfRange


def _check_len(n, *vectors):
    for v in vectors:
        if len(v) != n:
            raise IndexOutOfRange(f"length mismatch: expected {n}, got {len(v)}")


def mat_vec(A, x, result):
    """
    result += A @ x

    累加而不是覆盖：result 原有内容会保留，每次独立使用前调用方需要先清零。
    A 可以是 np.ndarray，也可以是 scipy.sparse 矩阵。
    """
    n = len(x)
    _check_len(n, result)
    if A.shape != (n, n):
        raise IndexOutOfRange(f"matrix shape {A.shape} does not match vector length {n}")
    np.add(result, A @ x, out=result)
    return result


def vec_add_vec(x, y, result):
    _check_len(len(x), y, result)
    np.add(x, y, out=result)
    return result


def vec_add_scalar(x, scalar, result):
    _check_len(len(x), result)
    np.add(x, scalar, out=result)
    return result


def vec_mul_vec(x, y, result):
    _check_len(len(x), y, result)
    np.multiply(x, y, out=result)
    return result


def mat_add_row_vec(A, b, result):
    """result[i][j] = A[i][j] + b[j]，即把 b 当作每行都相同的矩阵相加"""
    n = len(b)
    if A.shape != (n, n) or result.shape != (n, n):
        raise IndexOutOfRange(f"matrix shape {A.shape} does not match vector length {n}")
    np.add(A, b[np.newaxis, :], out=result)
    return result
