import numpy as np
import pytest

from bitmap_transpose.matrix import transpose_matrix


@pytest.mark.parametrize("m,n", [(1, 1), (1, 5), (5, 1), (2, 3), (3, 2), (4, 4)])
def test_shape_and_values_vs_numpy(m, n):
    X = np.arange(m * n, dtype=np.uint8).reshape(m, n)
    Y = transpose_matrix(X)
    assert Y.shape == (n, m)
    assert np.array_equal(Y, np.transpose(X))


def test_involution_property():
    rng = np.random.default_rng(0)
    X = rng.integers(0, 256, size=(3, 5), dtype=np.uint8)
    Z = transpose_matrix(transpose_matrix(X))
    assert Z.shape == X.shape
    assert np.array_equal(Z, X)


def test_dtype_preserved():
    X = np.array([[0, 1], [1, 0]], dtype=np.uint8)
    assert transpose_matrix(X).dtype == np.uint8


def test_result_is_numpy_array():
    assert isinstance(transpose_matrix(np.zeros((2, 3), dtype=np.uint8)), np.ndarray)


def test_rejects_wrong_rank():
    with pytest.raises(ValueError):
        transpose_matrix(np.arange(6, dtype=np.uint8))
