"""
Geometry module for tetrageom.

Provides vector helpers, Plücker rays, tetrahedra and the
Platis & Theoharis ray/tetrahedron crossing test.
"""

from .vector import vec, as_vec
from .plucker import PluckerVec, AnchoredPluckerVec
from .tetra import (
    Tetra,
    Sphere,
    TetraFaceBary,
    orient_tetras,
    bounding_spheres,
    spheres_intersect,
)
from .plucker_tetra import PluckerTetra
from .intersect import (
    face_barycentrics,
    ray_tetra_intersect,
    ray_tetra_distances,
)

__all__ = [
    'vec',
    'as_vec',
    'PluckerVec',
    'AnchoredPluckerVec',
    'Tetra',
    'Sphere',
    'TetraFaceBary',
    'orient_tetras',
    'bounding_spheres',
    'spheres_intersect',
    'PluckerTetra',
    'face_barycentrics',
    'ray_tetra_intersect',
    'ray_tetra_distances',
]
