"""
tetrageom Test Suite

Tests organized by:
- test_vector.py: Vector helpers
- test_plucker.py: Plücker rays and the side operator
- test_tetra.py: Tetrahedron orientation, bounding spheres, distances
- test_plucker_tetra.py: Edge rays and index tables
- test_intersect.py: Ray/tetrahedron crossings
- test_performance.py: Batched kernel throughput gates
"""
