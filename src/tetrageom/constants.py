"""
Numeric Policy and Tetrahedron Index Tables

Coordinates are opaque floating-point values (no units). The index tables
encode the combinatorial structure of a tetrahedron under the fixed vertex
and face numbering used throughout tetrageom:

    F0(V3, V2, V1)
    F1(V2, V3, V0)
    F2(V1, V0, V3)
    F3(V0, V1, V2)

Edges of a PluckerTetra are stored as {0-1, 0-2, 0-3, 1-2, 1-3, 2-3}.
"""

import numpy as np

# ==================== NUMERIC POLICY ====================

VEC_DTYPE = np.float64  # Storage type for vectors, rays and vertices

# Tetra.distance() solves along the first axis whose ray direction
# component exceeds this magnitude.
DISTANCE_AXIS_EPS = 1e-6

# Orientation flags for Tetra.orient()
OUTWARD = +1
INWARD = -1

N_VERTICES = 4
N_FACES = 4
N_EDGES = 6


def _frozen(values, dtype):
    """Build a read-only table; numba treats module-level arrays as constants."""
    table = np.array(values, dtype=dtype)
    table.setflags(write=False)
    return table


# ==================== TETRAHEDRON TABLES ====================

# TETRA_FACE_VERTICES[face, vertex] -> index into the four tetra vertices
TETRA_FACE_VERTICES = _frozen([
    [3, 2, 1],
    [2, 3, 0],
    [1, 0, 3],
    [0, 1, 2],
], np.int64)

# ==================== PLUCKER TETRAHEDRON TABLES ====================

# PLUCKER_FACE_EDGES[face, edge] -> index into the six edge rays.
# Edge k of a face is the one opposite vertex k of that face.
PLUCKER_FACE_EDGES = _frozen([
    [3, 4, 5],  # 2-1, 1-3, 3-2
    [2, 1, 5],  # 3-0, 0-2, 2-3
    [2, 4, 0],  # 0-3, 3-1, 1-0
    [3, 1, 0],  # 1-2, 2-0, 0-1
], np.int64)

# True where the face traverses the stored edge end -> start
PLUCKER_FACE_FLIPS = _frozen([
    [True, False, True],
    [True, False, False],
    [False, True, True],
    [False, True, False],
], np.bool_)

# PLUCKER_FACE_SHARE[e1, e2] is True when both edges bound a common face
PLUCKER_FACE_SHARE = _frozen([
    [False, True, True, True, True, False],
    [True, False, True, True, False, True],
    [True, True, False, False, True, True],
    [True, True, False, False, True, True],
    [True, False, True, True, False, True],
    [False, True, True, True, True, False],
], np.bool_)

# Tetra vertex indices at the start and end of each stored edge
TETRA_EDGE_STARTS = _frozen([0, 0, 0, 1, 1, 2], np.int64)
TETRA_EDGE_ENDS = _frozen([1, 2, 3, 2, 3, 3], np.int64)


# ==================== TABLE SUMMARY ====================

if __name__ == "__main__":
    print("=" * 60)
    print("tetrageom index tables")
    print("=" * 60)

    print(f"\nDistance axis epsilon: {DISTANCE_AXIS_EPS:.1e}")

    print("\nFaces (vertex order, edges, flips):")
    for face in range(N_FACES):
        edges = ", ".join(
            f"{TETRA_EDGE_STARTS[e]}-{TETRA_EDGE_ENDS[e]}"
            f"{'*' if PLUCKER_FACE_FLIPS[face, k] else ''}"
            for k, e in enumerate(PLUCKER_FACE_EDGES[face])
        )
        print(f"  F{face}: V{tuple(TETRA_FACE_VERTICES[face])}  edges [{edges}]")

    print("\n  (* = traversed end -> start)")
    print("=" * 60)
