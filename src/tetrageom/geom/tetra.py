"""
Tetrahedron Geometry

Implements:
- Tetra: four ordered vertices with the fixed face numbering
    F0(V3, V2, V1), F1(V2, V3, V0), F2(V1, V0, V3), F3(V0, V1, V2)
- Orientation normalisation via the signed volume
- Enclosing (not minimal) bounding spheres for broad-phase culling
- Parametric distance along a ray to a barycentric point on a face

Batched Numba kernels over (n_tetra, 4, 3) vertex arrays are provided for
callers that process whole tessellations at once.
"""

import numpy as np
from numba import njit
import math

from ..constants import (
    VEC_DTYPE,
    DISTANCE_AXIS_EPS,
    OUTWARD,
    INWARD,
    N_FACES,
    TETRA_FACE_VERTICES,
)
from .vector import as_vec, translate_points


# ==================== SINGLE-TETRAHEDRON KERNELS ====================

@njit
def tetra_signed_volume(t):
    """
    Scalar triple product ((V1-V0) x (V2-V0)) . (V3-V0).

    Six times the signed volume of the tetrahedron.
    """
    v0 = t[1, 0] - t[0, 0]
    v1 = t[1, 1] - t[0, 1]
    v2 = t[1, 2] - t[0, 2]
    w0 = t[2, 0] - t[0, 0]
    w1 = t[2, 1] - t[0, 1]
    w2 = t[2, 2] - t[0, 2]

    n0 = v1 * w2 - v2 * w1
    n1 = v2 * w0 - v0 * w2
    n2 = v0 * w1 - v1 * w0

    return (n0 * (t[3, 0] - t[0, 0]) +
            n1 * (t[3, 1] - t[0, 1]) +
            n2 * (t[3, 2] - t[0, 2]))


@njit
def tetra_orient(t, direction):
    """
    Swap V0 and V1 if the winding disagrees with direction.

    Args:
        t: Vertices, shape (4, 3), modified in place
        direction: +1 (outward) or -1 (inward)

    Returns:
        swapped: True if V0 and V1 were exchanged

    Note:
        A zero-volume tetrahedron is never swapped.
    """
    vol = tetra_signed_volume(t)
    if (vol > 0.0 and direction == -1) or (vol < 0.0 and direction == 1):
        for j in range(3):
            tmp = t[0, j]
            t[0, j] = t[1, j]
            t[1, j] = tmp
        return True
    return False


@njit
def tetra_bounding_sphere(t, out):
    """
    Centroid and maximum centroid-to-vertex distance.

    Args:
        t: Vertices, shape (4, 3)
        out: Output [X, Y, Z, R], shape (4,)
    """
    bx = (t[0, 0] + t[1, 0] + t[2, 0] + t[3, 0]) / 4.0
    by = (t[0, 1] + t[1, 1] + t[2, 1] + t[3, 1]) / 4.0
    bz = (t[0, 2] + t[1, 2] + t[2, 2] + t[3, 2]) / 4.0

    max_r_sqr = 0.0
    for i in range(4):
        dx = bx - t[i, 0]
        dy = by - t[i, 1]
        dz = bz - t[i, 2]
        r_sqr = dx * dx + dy * dy + dz * dz
        if r_sqr > max_r_sqr:
            max_r_sqr = r_sqr

    out[0] = bx
    out[1] = by
    out[2] = bz
    out[3] = math.sqrt(max_r_sqr)


@njit
def sphere_intersect(s1, s2):
    """
    Containment-radius test between spheres given as [X, Y, Z, R].

    True when (R1 - R2)^2 > |C1 - C2|^2, i.e. |R1 - R2| exceeds the centre
    separation. This is not the sum-of-radii overlap test.
    """
    dx = s1[0] - s2[0]
    dy = s1[1] - s2[1]
    dz = s1[2] - s2[2]
    dr = s1[3] - s2[3]
    return dr * dr > dx * dx + dy * dy + dz * dz


@njit
def distance_axis(U):
    """
    First axis with |U[axis]| > DISTANCE_AXIS_EPS.

    Falls back to the last axis when none qualifies; the division in
    tetra_distance() is then unchecked.
    """
    for dim in range(3):
        if U[dim] > DISTANCE_AXIS_EPS or U[dim] < -DISTANCE_AXIS_EPS:
            return dim
    return 2


@njit(error_model='numpy')
def tetra_distance(t, P, U, w, face):
    """
    Solve P + d*U = sum_i u_i * F_i along a single axis.

    Args:
        t: Vertices, shape (4, 3)
        P: Ray origin, shape (3,)
        U: Ray direction, shape (3,)
        w: Unscaled barycentric weights on the face, shape (3,)
        face: Face index 0-3

    Returns:
        d: Signed parametric distance along the ray
    """
    s = w[0] + w[1] + w[2]
    u0 = w[0] / s
    u1 = w[1] / s
    u2 = w[2] / s

    dim = distance_axis(U)

    p0 = t[TETRA_FACE_VERTICES[face, 0], dim]
    p1 = t[TETRA_FACE_VERTICES[face, 1], dim]
    p2 = t[TETRA_FACE_VERTICES[face, 2], dim]

    return ((u0 * p0 + u1 * p1 + u2 * p2) - P[dim]) / U[dim]


# ==================== BATCHED KERNELS ====================

@njit
def orient_tetras(verts, direction):
    """
    Orient every tetrahedron in place.

    Args:
        verts: Vertex array, shape (n_tetra, 4, 3)
        direction: +1 or -1

    Returns:
        n_swapped: Number of tetrahedra whose V0/V1 were exchanged
    """
    n_swapped = 0
    for i in range(verts.shape[0]):
        if tetra_orient(verts[i], direction):
            n_swapped += 1
    return n_swapped


@njit
def bounding_spheres(verts):
    """
    Bounding sphere of every tetrahedron.

    Args:
        verts: Vertex array, shape (n_tetra, 4, 3)

    Returns:
        spheres: [X, Y, Z, R] per tetrahedron, shape (n_tetra, 4)
    """
    n = verts.shape[0]
    spheres = np.zeros((n, 4), dtype=np.float64)
    for i in range(n):
        tetra_bounding_sphere(verts[i], spheres[i])
    return spheres


@njit
def spheres_intersect(spheres, sphere):
    """
    Apply sphere_intersect() between each row of spheres and one sphere.

    Args:
        spheres: Shape (n, 4)
        sphere: Shape (4,)

    Returns:
        mask: Boolean array, shape (n,)
    """
    n = spheres.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    for i in range(n):
        mask[i] = sphere_intersect(spheres[i], sphere)
    return mask


# ==================== PYTHON INTERFACE ====================

def _check_face(face):
    if not 0 <= face < N_FACES:
        raise ValueError(f"Unknown face index: {face}")


class Sphere:
    """
    Sphere used for conservative broad-phase rejection.

    Attributes:
        X, Y, Z: Centre
        R: Radius
    """

    __slots__ = ("X", "Y", "Z", "R")

    def __init__(self, X=0.0, Y=0.0, Z=0.0, R=0.0):
        self.X = float(X)
        self.Y = float(Y)
        self.Z = float(Z)
        self.R = float(R)

    @property
    def center(self):
        return np.array([self.X, self.Y, self.Z], dtype=VEC_DTYPE)

    def as_array(self):
        return np.array([self.X, self.Y, self.Z, self.R], dtype=VEC_DTYPE)

    def intersect(self, other):
        """
        True if |R1 - R2| exceeds the distance between the centres.

        Compared in squared form, so no square root is taken.
        """
        return bool(sphere_intersect(self.as_array(), other.as_array()))

    def __repr__(self):
        return f"Sphere(X={self.X:g}, Y={self.Y:g}, Z={self.Z:g}, R={self.R:g})"


class TetraFaceBary:
    """
    Unscaled barycentric weights of a point on one face of a tetrahedron.

    Weights are in the face's vertex order, i.e. w[k] belongs to vertex
    Tetra.vertex_idx(face, k).
    """

    __slots__ = ("w", "face")

    def __init__(self, w, face):
        _check_face(face)
        self.w = as_vec(w)
        self.face = int(face)

    def normalized(self):
        return self.w / np.sum(self.w)

    def __repr__(self):
        return f"TetraFaceBary(w={self.w.tolist()}, face={self.face})"


class Tetra:
    """
    Tetrahedron with four ordered vertices.

    Vertex order fixes face orientation. Call orient() once after
    construction whenever the Plücker sidedness convention is relied on.

    Attributes:
        verts: Vertex positions, shape (4, 3)
    """

    __slots__ = ("verts",)

    def __init__(self, verts=None):
        if verts is None:
            self.verts = np.zeros((4, 3), dtype=VEC_DTYPE)
        else:
            self.verts = np.array(verts, dtype=VEC_DTYPE)
            if self.verts.shape != (4, 3):
                raise ValueError(
                    f"Tetra needs 4 vertices of 3 components, got shape "
                    f"{self.verts.shape}"
                )

    def __getitem__(self, i):
        return self.verts[i]

    def __len__(self):
        return 4

    @staticmethod
    def vertex_idx(face, vertex):
        """
        Index into verts of the given vertex of the given face.

        Args:
            face: Face index 0-3
            vertex: Vertex within the face, 0-2
        """
        _check_face(face)
        if not 0 <= vertex < 3:
            raise ValueError(f"Unknown face vertex index: {vertex}")
        return int(TETRA_FACE_VERTICES[face, vertex])

    def face_vertices(self, face):
        """Positions of the three vertices of a face, shape (3, 3)."""
        _check_face(face)
        return self.verts[TETRA_FACE_VERTICES[face]]

    def signed_volume(self):
        """Scalar triple product ((V1-V0) x (V2-V0)) . (V3-V0)."""
        return tetra_signed_volume(self.verts)

    def volume(self):
        return abs(self.signed_volume()) / 6.0

    def orient(self, direction=OUTWARD):
        """
        Arrange vertices so all faces point outward (+1) or inward (-1).

        Swaps V0 and V1 when the sign of signed_volume() disagrees with
        direction. Degenerate (zero-volume) tetrahedra are left unchanged.

        Returns:
            swapped: True if V0 and V1 were exchanged

        Raises:
            ValueError: If direction is not +1 or -1
        """
        if isinstance(direction, bool) or direction not in (OUTWARD, INWARD):
            raise ValueError(f"Unknown orientation direction: {direction}")
        return bool(tetra_orient(self.verts, direction))

    def translate(self, dx):
        """Translate all four vertices by dx in place."""
        translate_points(self.verts, as_vec(dx))

    def bounding_sphere(self):
        """
        Enclosing sphere centred on the centroid.

        Not the minimal bounding sphere; only used for conservative culling.
        """
        out = np.zeros(4, dtype=VEC_DTYPE)
        tetra_bounding_sphere(self.verts, out)
        return Sphere(out[0], out[1], out[2], out[3])

    def distance(self, ap, bary):
        """
        Parametric distance from an anchored ray to a point on a face.

        Args:
            ap: AnchoredPluckerVec
            bary: TetraFaceBary on one of this tetrahedron's faces

        Returns:
            d: Signed distance such that ap.P + d*ap.U is the point

        Note:
            The result is inf/NaN when every |U| component is below
            DISTANCE_AXIS_EPS.
        """
        return tetra_distance(self.verts, ap.P, ap.U, bary.w, bary.face)

    def copy(self):
        return Tetra(self.verts)

    def __repr__(self):
        return f"Tetra(verts={self.verts.tolist()})"

    def summary(self):
        """Print summary statistics."""
        sph = self.bounding_sphere()
        print(f"\nTetra Summary:")
        for i in range(4):
            x, y, z = self.verts[i]
            print(f"  V{i}: ({x:+.4f}, {y:+.4f}, {z:+.4f})")
        print(f"  Signed volume x6: {self.signed_volume():+.4e}")
        print(f"  Bounding sphere:  {sph}")


# ==================== TESTING ====================

if __name__ == "__main__":
    print("Testing Tetra...")

    t = Tetra([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]])
    t.orient(OUTWARD)
    t.summary()

    print("\nTesting batched kernels...")
    verts = np.random.rand(1000, 4, 3)
    n_swapped = orient_tetras(verts, OUTWARD)
    spheres = bounding_spheres(verts)
    print(f"  Swapped {n_swapped} / {len(verts)} tetrahedra")
    print(f"  Mean bounding radius: {np.mean(spheres[:, 3]):.4f}")

    print("\n✅ Tetra tests passed!")
