"""
Plücker Tetrahedron

A tetrahedron represented by the Plücker vectors of its six edges, for use
with the Platis & Theoharis intersection test. Edges are stored in the fixed
order {0-1, 0-2, 0-3, 1-2, 1-3, 2-3}, each pointing from the lower to the
higher vertex index. Faces reuse these rays with a per-face flip flag so
that every face is traversed in its own vertex order.
"""

import numpy as np
from numba import njit

from ..constants import (
    VEC_DTYPE,
    N_EDGES,
    N_FACES,
    PLUCKER_FACE_EDGES,
    PLUCKER_FACE_FLIPS,
    PLUCKER_FACE_SHARE,
    TETRA_EDGE_STARTS,
    TETRA_EDGE_ENDS,
)
from .vector import as_vec
from .plucker import PluckerVec, plucker_init_from_segment, plucker_translate


# ==================== NUMBA-COMPILED FUNCTIONS ====================

@njit
def plucker_tetra_init(t, U, V):
    """
    Fill the six edge rays of a tetrahedron.

    Args:
        t: Vertices, shape (4, 3)
        U: Edge directions, shape (6, 3), modified in place
        V: Edge moments, shape (6, 3), modified in place
    """
    for k in range(6):
        plucker_init_from_segment(
            t[TETRA_EDGE_STARTS[k]], t[TETRA_EDGE_ENDS[k]], U[k], V[k]
        )


@njit
def plucker_tetra_translate(dx, U, V):
    for k in range(6):
        plucker_translate(dx, U[k], V[k])


# ==================== PYTHON INTERFACE ====================

def _check_edge(edge):
    if not 0 <= edge < N_EDGES:
        raise ValueError(f"Unknown edge index: {edge}")


class PluckerTetra:
    """
    Six edge rays of a Tetra.

    Built from a Tetra only; the tetrahedron should already be oriented
    (Tetra.orient) for the face sign convention to hold.

    Attributes:
        U: Edge directions, shape (6, 3)
        V: Edge moments, shape (6, 3)
    """

    __slots__ = ("U", "V")

    def __init__(self, tetra=None):
        self.U = np.zeros((N_EDGES, 3), dtype=VEC_DTYPE)
        self.V = np.zeros((N_EDGES, 3), dtype=VEC_DTYPE)
        if tetra is not None:
            self.init(tetra)

    @classmethod
    def from_tetra(cls, tetra):
        return cls(tetra)

    def init(self, tetra):
        """Rebuild all six edges from the vertices of tetra."""
        plucker_tetra_init(tetra.verts, self.U, self.V)

    def translate(self, dx):
        """Translate every edge ray by dx in place."""
        plucker_tetra_translate(as_vec(dx), self.U, self.V)

    def __getitem__(self, i):
        _check_edge(i)
        return PluckerVec.view(self.U[i], self.V[i])

    def __len__(self):
        return N_EDGES

    @staticmethod
    def edge_idx(face, edge):
        """
        Edge ray bounding the given face, and its flip flag.

        Args:
            face: Face index 0-3
            edge: Edge within the face, 0-2. Edge k is opposite face
                  vertex k (see Tetra.vertex_idx).

        Returns:
            (idx, flip): Index into the six edges, and whether the face
            traverses that edge end -> start.
        """
        if not 0 <= face < N_FACES:
            raise ValueError(f"Unknown face index: {face}")
        if not 0 <= edge < 3:
            raise ValueError(f"Unknown face edge index: {edge}")
        return int(PLUCKER_FACE_EDGES[face, edge]), bool(PLUCKER_FACE_FLIPS[face, edge])

    @staticmethod
    def tetra_vertices(edge):
        """
        Tetra vertex indices at the ends of a stored edge.

        Returns:
            (start, end)
        """
        _check_edge(edge)
        return int(TETRA_EDGE_STARTS[edge]), int(TETRA_EDGE_ENDS[edge])

    @staticmethod
    def shares_face(edge1, edge2):
        """True if two distinct edges bound a common face."""
        _check_edge(edge1)
        _check_edge(edge2)
        return bool(PLUCKER_FACE_SHARE[edge1, edge2])

    def copy(self):
        pt = PluckerTetra()
        pt.U[:] = self.U
        pt.V[:] = self.V
        return pt

    def __repr__(self):
        edges = ", ".join(
            f"{TETRA_EDGE_STARTS[k]}-{TETRA_EDGE_ENDS[k]}" for k in range(N_EDGES)
        )
        return f"PluckerTetra(edges=[{edges}])"
