"""
Ray / Tetrahedron Crossing (Platis & Theoharis)

For a tetrahedron oriented with Tetra.orient(+1), the side products of a
ray with the three edges of face f (taken with the face's flip flags) are
the unscaled barycentric weights of the point where the ray's line meets
that face:

    all three > 0  ->  the line enters the tetrahedron through f
    all three < 0  ->  the line leaves the tetrahedron through f

A zero weight means the line grazes an edge or vertex of the face, or lies
in its plane; such faces are never reported as crossed.

Each of the six edge products is computed once and reused by the two faces
sharing that edge.

References:
- Platis & Theoharis (2003), "Fast Ray-Tetrahedron Intersection using
  Plücker Coordinates", Journal of Graphics Tools 8(4)
"""

import numpy as np
from numba import njit

from ..constants import PLUCKER_FACE_EDGES, PLUCKER_FACE_FLIPS
from .plucker import plucker_dot
from .tetra import TetraFaceBary, tetra_distance
from .plucker_tetra import PluckerTetra


# ==================== NUMBA-COMPILED FUNCTIONS ====================

@njit
def edge_side_products(rU, rV, U, V, out):
    """
    Unflipped side products of a ray with all six edges.

    Args:
        rU, rV: Ray direction and moment, shape (3,)
        U, V: Edge rays, shape (6, 3)
        out: Output, shape (6,)
    """
    for k in range(6):
        out[k] = plucker_dot(rU, rV, U[k], V[k], False)


@njit
def face_weights(sides, face, w):
    """Apply the face's edge selection and flips to the six side products."""
    for k in range(3):
        s = sides[PLUCKER_FACE_EDGES[face, k]]
        if PLUCKER_FACE_FLIPS[face, k]:
            s = -s
        w[k] = s


@njit
def ray_tetra_crossings(rU, rV, U, V, w_enter, w_exit):
    """
    Find the entry and exit faces of a line through a tetrahedron.

    Args:
        rU, rV: Ray direction and moment, shape (3,)
        U, V: Edge rays of an oriented tetrahedron, shape (6, 3)
        w_enter: Output weights on the entry face, shape (3,)
        w_exit: Output weights on the exit face, shape (3,)

    Returns:
        (enter_face, exit_face): Face indices, -1 where none was found
    """
    sides = np.empty(6, dtype=np.float64)
    edge_side_products(rU, rV, U, V, sides)

    w = np.empty(3, dtype=np.float64)
    enter_face = -1
    exit_face = -1

    for face in range(4):
        face_weights(sides, face, w)
        if w[0] > 0.0 and w[1] > 0.0 and w[2] > 0.0:
            enter_face = face
            w_enter[:] = w
        elif w[0] < 0.0 and w[1] < 0.0 and w[2] < 0.0:
            exit_face = face
            w_exit[:] = w

    return enter_face, exit_face


@njit
def ray_tetra_segment(t, P, rU, rV, U, V):
    """
    Entry and exit distances along a ray.

    Args:
        t: Vertices of the oriented tetrahedron, shape (4, 3)
        P: Ray origin, shape (3,)
        rU, rV: Ray direction and moment, shape (3,)
        U, V: Edge rays of t, shape (6, 3)

    Returns:
        (hit, t_enter, t_exit)
    """
    w_enter = np.empty(3, dtype=np.float64)
    w_exit = np.empty(3, dtype=np.float64)
    enter_face, exit_face = ray_tetra_crossings(rU, rV, U, V, w_enter, w_exit)

    if enter_face < 0 or exit_face < 0:
        return False, 0.0, 0.0

    t_enter = tetra_distance(t, P, rU, w_enter, enter_face)
    t_exit = tetra_distance(t, P, rU, w_exit, exit_face)
    return True, t_enter, t_exit


# ==================== PYTHON INTERFACE ====================

def face_barycentrics(ray, ptetra, face):
    """
    Unscaled barycentric weights of the ray's line on one face.

    Args:
        ray: PluckerVec or AnchoredPluckerVec
        ptetra: PluckerTetra of an oriented tetrahedron
        face: Face index 0-3

    Returns:
        TetraFaceBary, with weights in the face's vertex order
    """
    w = np.empty(3)
    for k in range(3):
        idx, flip = ptetra.edge_idx(face, k)
        w[k] = ray.dot(ptetra[idx], flip)
    return TetraFaceBary(w, face)


def ray_tetra_intersect(ray, ptetra):
    """
    Entry and exit faces of the ray's line through a tetrahedron.

    Args:
        ray: PluckerVec or AnchoredPluckerVec
        ptetra: PluckerTetra of a tetrahedron oriented with orient(+1)

    Returns:
        (enter, exit) TetraFaceBary pair, or None if the line misses or
        only touches the boundary

    Note:
        A line that enters or leaves exactly through an edge or vertex
        also returns None, even when it passes through the interior.
        Grid-aligned rays through lattice-aligned tessellations hit edges
        often; callers needing those crossings must break the tie
        themselves, e.g. by perturbing the ray origin.
    """
    w_enter = np.empty(3)
    w_exit = np.empty(3)
    enter_face, exit_face = ray_tetra_crossings(
        ray.U, ray.V, ptetra.U, ptetra.V, w_enter, w_exit
    )
    if enter_face < 0 or exit_face < 0:
        return None
    return TetraFaceBary(w_enter, enter_face), TetraFaceBary(w_exit, exit_face)


def ray_tetra_distances(ap, tetra, ptetra=None):
    """
    Parametric distances at which an anchored ray enters and leaves.

    Args:
        ap: AnchoredPluckerVec
        tetra: Tetra oriented with orient(+1)
        ptetra: PluckerTetra of tetra; built on the fly when omitted

    Returns:
        (t_enter, t_exit), or None if the line misses. Either value may be
        negative when the crossing lies behind the ray origin.
    """
    if ptetra is None:
        ptetra = PluckerTetra(tetra)

    hit, t_enter, t_exit = ray_tetra_segment(
        tetra.verts, ap.P, ap.U, ap.V, ptetra.U, ptetra.V
    )
    if not hit:
        return None
    return t_enter, t_exit
