"""
tetrageom: Geometric Primitives for Tetrahedral Density Estimation

Plücker-coordinate rays, tetrahedra and the index tables behind the
Platis & Theoharis ray/tetrahedron test, used to deposit the mass of a
Lagrangian tessellation of N-body particles onto a density grid.
"""

__version__ = "0.1.0"

# Import key classes for convenient access
from .constants import OUTWARD, INWARD, DISTANCE_AXIS_EPS
from .geom import (
    PluckerVec,
    AnchoredPluckerVec,
    Tetra,
    Sphere,
    TetraFaceBary,
    PluckerTetra,
)

__all__ = [
    "OUTWARD",
    "INWARD",
    "DISTANCE_AXIS_EPS",
    "PluckerVec",
    "AnchoredPluckerVec",
    "Tetra",
    "Sphere",
    "TetraFaceBary",
    "PluckerTetra",
]
