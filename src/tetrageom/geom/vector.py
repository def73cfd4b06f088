"""
Three-Component Vector Helpers

Vectors are plain numpy arrays of shape (3,). The Numba kernels here are
the elementwise building blocks shared by the Plücker and tetrahedron code.
"""

import numpy as np
from numba import njit

from ..constants import VEC_DTYPE


def vec(x=0.0, y=0.0, z=0.0):
    """Build a vector from three components."""
    return np.array([x, y, z], dtype=VEC_DTYPE)


def as_vec(v):
    """
    Copy any length-3 sequence into a new vector.

    Raises:
        ValueError: If v does not hold exactly three components
    """
    out = np.array(v, dtype=VEC_DTYPE).reshape(-1)
    if out.shape != (3,):
        raise ValueError(f"Expected 3 vector components, got shape {np.shape(v)}")
    return out


# ==================== NUMBA-COMPILED FUNCTIONS ====================

@njit
def neg_cross(a, b, out):
    """
    out = -(a x b), expanded componentwise.

    Args:
        a, b: Input vectors, shape (3,)
        out: Output vector, shape (3,), modified in place
    """
    out[0] = -a[1] * b[2] + a[2] * b[1]
    out[1] = -a[2] * b[0] + a[0] * b[2]
    out[2] = -a[0] * b[1] + a[1] * b[0]


@njit
def add_neg_cross(a, b, out):
    """out += -(a x b)"""
    out[0] += -a[1] * b[2] + a[2] * b[1]
    out[1] += -a[2] * b[0] + a[0] * b[2]
    out[2] += -a[0] * b[1] + a[1] * b[0]


@njit
def translate_points(points, dx):
    """
    Add dx to every row of points in place.

    Args:
        points: Position array, shape (n, 3)
        dx: Displacement, shape (3,)
    """
    for i in range(points.shape[0]):
        for j in range(3):
            points[i, j] += dx[j]
