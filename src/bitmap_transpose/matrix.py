"""Rank-2 transpose implemented with JAX primitives."""

from __future__ import annotations

import jax.numpy as jnp
import numpy as np
from numpy.typing import ArrayLike


def transpose_matrix(X: ArrayLike) -> np.ndarray:
    """Return the transpose of a rank-2 array as a host numpy array."""
    if np.ndim(X) != 2:
        raise ValueError("transpose_matrix expects a rank-2 array")
    return np.asarray(jnp.swapaxes(jnp.asarray(X), -2, -1))
