"""
Plücker Ray Representation

A ray with origin P and direction L is stored as the pair

    U = L
    V = L x P  (= -P x L)

Two rays give the same (U, V) iff they lie on the same oriented line with
the same direction scale. The permuted inner product

    S = U1 . V2 + V1 . U2

is the side operator used by the Platis & Theoharis ray/tetrahedron test:
its sign tells which side of one line the other passes on, and S = 0 means
the lines are coplanar (they intersect or are parallel).

References:
- Platis & Theoharis (2003), "Fast Ray-Tetrahedron Intersection using
  Plücker Coordinates", Journal of Graphics Tools 8(4)
"""

import numpy as np
from numba import njit

from .vector import as_vec, neg_cross, add_neg_cross


# ==================== NUMBA-COMPILED FUNCTIONS ====================

@njit
def plucker_init(P, L, U, V):
    """
    Fill (U, V) for a ray with origin P and unit direction L.

    L is copied as-is; callers are responsible for normalising it.
    """
    for i in range(3):
        U[i] = L[i]
    neg_cross(P, L, V)


@njit
def plucker_init_from_segment(P1, P2, U, V):
    """
    Fill (U, V) for the ray from P1 towards P2.

    U = P2 - P1 keeps the segment length; it is not normalised.
    """
    for i in range(3):
        U[i] = P2[i] - P1[i]
    neg_cross(P1, U, V)


@njit
def plucker_translate(dx, U, V):
    """Move the line by dx: V += -dx x U, U unchanged."""
    add_neg_cross(dx, U, V)


@njit
def plucker_dot(U1, V1, U2, V2, flip):
    """
    Permuted inner product of two Plücker vectors.

    Returns S = U1.V2 + V1.U2 when flip is True and -S otherwise. The face
    edge tables in tetrageom.constants assume this convention.
    """
    s = 0.0
    for i in range(3):
        s += U1[i] * V2[i] + V1[i] * U2[i]
    if flip:
        return s
    return -s


@njit
def sign_of(x):
    if x == 0.0:
        return 0
    elif x > 0.0:
        return 1
    return -1


def _ray_of(p):
    """Accept either a PluckerVec or an AnchoredPluckerVec."""
    if isinstance(p, AnchoredPluckerVec):
        return p.ray
    return p


# ==================== PLUCKER VECTOR ====================

class PluckerVec:
    """
    Oriented line in Plücker coordinates.

    Attributes:
        U: Direction, shape (3,)
        V: Moment, shape (3,)
    """

    __slots__ = ("U", "V")

    def __init__(self, U=None, V=None):
        self.U = np.zeros(3) if U is None else as_vec(U)
        self.V = np.zeros(3) if V is None else as_vec(V)

    @classmethod
    def from_ray(cls, P, L):
        p = cls()
        p.init(P, L)
        return p

    @classmethod
    def from_segment(cls, P1, P2):
        p = cls()
        p.init_from_segment(P1, P2)
        return p

    @classmethod
    def view(cls, U, V):
        """Wrap existing (3,) arrays without copying (used by PluckerTetra)."""
        p = cls.__new__(cls)
        p.U = U
        p.V = V
        return p

    def init(self, P, L):
        """
        Initialise from a ray origin P and a unit direction L.

        Args:
            P: Ray origin, shape (3,)
            L: Unit direction, shape (3,). Not normalised here.
        """
        plucker_init(as_vec(P), as_vec(L), self.U, self.V)

    def init_from_segment(self, P1, P2):
        """
        Initialise from the ray pointing from P1 to P2.

        The direction U = P2 - P1 is proportional to the segment length,
        unlike init(). Coincident points give U = 0, and every side product
        against such a ray is zero.
        """
        plucker_init_from_segment(as_vec(P1), as_vec(P2), self.U, self.V)

    def translate(self, dx):
        """Translate the underlying line by dx in place."""
        plucker_translate(as_vec(dx), self.U, self.V)

    def dot(self, other, flip=False):
        """
        Permuted inner product with another Plücker vector.

        Args:
            other: PluckerVec or AnchoredPluckerVec
            flip: Face edge sign flag from PluckerTetra.edge_idx()

        Returns:
            S if flip else -S, where S = U1.V2 + V1.U2
        """
        o = _ray_of(other)
        return plucker_dot(self.U, self.V, o.U, o.V, flip)

    def sign_dot(self, other, flip=False):
        """
        Permuted inner product plus its sign.

        Returns:
            (dot, sign) with sign in {-1, 0, +1}
        """
        d = self.dot(other, flip)
        return d, sign_of(d)

    def copy(self):
        return PluckerVec(self.U, self.V)

    def allclose(self, other, atol=1e-8):
        o = _ray_of(other)
        return (np.allclose(self.U, o.U, rtol=0.0, atol=atol) and
                np.allclose(self.V, o.V, rtol=0.0, atol=atol))

    def __repr__(self):
        return f"PluckerVec(U={self.U.tolist()}, V={self.V.tolist()})"


class AnchoredPluckerVec:
    """
    Plücker vector that also remembers the ray origin.

    The origin is needed whenever a parametric distance along the ray has
    to be recovered (see Tetra.distance).

    Attributes:
        ray: The underlying PluckerVec
        P: Ray origin, shape (3,)
    """

    __slots__ = ("ray", "P")

    def __init__(self, ray=None, P=None):
        self.ray = PluckerVec() if ray is None else ray.copy()
        self.P = np.zeros(3) if P is None else as_vec(P)

    @classmethod
    def from_ray(cls, P, L):
        ap = cls()
        ap.init(P, L)
        return ap

    @classmethod
    def from_segment(cls, P1, P2):
        ap = cls()
        ap.init_from_segment(P1, P2)
        return ap

    @property
    def U(self):
        return self.ray.U

    @property
    def V(self):
        return self.ray.V

    def init(self, P, L):
        self.ray.init(P, L)
        self.P[:] = as_vec(P)

    def init_from_segment(self, P1, P2):
        self.ray.init_from_segment(P1, P2)
        self.P[:] = as_vec(P1)

    def translate(self, dx):
        """Translate the line and its origin by dx in place."""
        dx = as_vec(dx)
        self.ray.translate(dx)
        self.P += dx

    def dot(self, other, flip=False):
        return self.ray.dot(other, flip)

    def sign_dot(self, other, flip=False):
        return self.ray.sign_dot(other, flip)

    def point_at(self, t):
        """Position P + t*U along the ray."""
        return self.P + t * self.ray.U

    def copy(self):
        return AnchoredPluckerVec(self.ray, self.P)

    def __repr__(self):
        return (f"AnchoredPluckerVec(U={self.U.tolist()}, V={self.V.tolist()}, "
                f"P={self.P.tolist()})")


# ==================== TESTING ====================

if __name__ == "__main__":
    print("Testing PluckerVec...")

    ray = AnchoredPluckerVec.from_ray([0.1, 0.1, -1.0], [0.0, 0.0, 1.0])
    edge = PluckerVec.from_segment([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    print(f"\n  {ray}")
    print(f"  {edge}")

    d, s = ray.sign_dot(edge, flip=False)
    print(f"  side(ray, edge) = {d:+.3f} (sign {s:+d})")

    ray.translate([1.0, 2.0, 3.0])
    direct = PluckerVec.from_ray([1.1, 2.1, 2.0], [0.0, 0.0, 1.0])
    print(f"  translate matches direct construction: {ray.ray.allclose(direct)}")

    print("\n✅ PluckerVec tests passed!")
