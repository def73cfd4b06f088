"""
Tests for the Plücker tetrahedron and its index tables

Validates:
- Edge ray construction and translation
- Face -> edge table and flip flags against the face vertex order
- Face-share table
- Read-only tables
"""

import pytest
import numpy as np

from tetrageom import constants
from tetrageom.constants import OUTWARD
from tetrageom.geom import Tetra, PluckerTetra, PluckerVec

UNIT_TETRA = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
EDGE_ORDER = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


def directed_face_edge(face, edge):
    """(from, to) tetra vertices of a face edge in traversal order."""
    idx, flip = PluckerTetra.edge_idx(face, edge)
    start, end = PluckerTetra.tetra_vertices(idx)
    return (end, start) if flip else (start, end)


class TestPluckerTetraInit:
    """Test edge ray construction."""

    def test_edges_match_segments(self):
        rng = np.random.default_rng(11)
        t = Tetra(rng.normal(size=(4, 3)))
        pt = PluckerTetra(t)

        assert len(pt) == 6
        for k, (a, b) in enumerate(EDGE_ORDER):
            assert pt[k].allclose(PluckerVec.from_segment(t[a], t[b]), atol=1e-12)

    def test_unit_tetra_directions(self):
        pt = PluckerTetra.from_tetra(Tetra(UNIT_TETRA))

        np.testing.assert_array_equal(pt.U[0], [1.0, 0.0, 0.0])
        np.testing.assert_array_equal(pt.U[3], [-1.0, 1.0, 0.0])
        np.testing.assert_array_equal(pt.U[5], [0.0, -1.0, 1.0])

    def test_reinit(self):
        pt = PluckerTetra(Tetra(UNIT_TETRA))
        t = Tetra(np.array(UNIT_TETRA) * 2.0)
        pt.init(t)
        np.testing.assert_array_equal(pt.U[2], [0.0, 0.0, 2.0])

    def test_edge_view_is_live(self):
        """Indexing returns a view onto the stored edge."""
        pt = PluckerTetra(Tetra(UNIT_TETRA))
        edge = pt[4]
        pt.translate([1.0, 1.0, 1.0])
        np.testing.assert_array_equal(edge.V, pt.V[4])

    def test_bad_edge_index(self):
        pt = PluckerTetra(Tetra(UNIT_TETRA))
        with pytest.raises(ValueError, match="Unknown edge index"):
            pt[6]


class TestPluckerTetraTranslate:
    """Test translation of all six edges."""

    def test_translate_matches_rebuild(self):
        rng = np.random.default_rng(12)
        t = Tetra(rng.normal(size=(4, 3)))
        pt = PluckerTetra(t)
        dx = np.array([3.0, -1.5, 0.25])

        pt.translate(dx)
        t.translate(dx)
        rebuilt = PluckerTetra(t)

        np.testing.assert_allclose(pt.U, rebuilt.U, atol=1e-12)
        np.testing.assert_allclose(pt.V, rebuilt.V, atol=1e-12)

    def test_copy_is_independent(self):
        pt = PluckerTetra(Tetra(UNIT_TETRA))
        cp = pt.copy()
        cp.translate([0.0, 5.0, 0.0])
        assert not np.allclose(pt.V, cp.V)


class TestEdgeTables:
    """Test the face -> edge tables."""

    def test_edge_vertices_on_face(self):
        """Both ends of every face edge are vertices of that face."""
        for face in range(4):
            face_verts = {Tetra.vertex_idx(face, k) for k in range(3)}
            for edge in range(3):
                idx, _ = PluckerTetra.edge_idx(face, edge)
                start, end = PluckerTetra.tetra_vertices(idx)
                assert start in face_verts
                assert end in face_verts

    def test_edge_opposite_face_vertex(self):
        """Face edge k does not touch face vertex k."""
        for face in range(4):
            for k in range(3):
                idx, _ = PluckerTetra.edge_idx(face, k)
                assert Tetra.vertex_idx(face, k) not in PluckerTetra.tetra_vertices(idx)

    def test_flips_follow_face_winding(self):
        """Flipped edges trace the face vertices in order."""
        for face in range(4):
            v = [Tetra.vertex_idx(face, k) for k in range(3)]
            for k in range(3):
                assert directed_face_edge(face, k) == (v[(k + 1) % 3], v[(k + 2) % 3])

    def test_shared_edges_traversed_oppositely(self):
        """Every edge bounds two faces, which traverse it in opposite directions."""
        uses = {k: [] for k in range(6)}
        for face in range(4):
            for edge in range(3):
                idx, flip = PluckerTetra.edge_idx(face, edge)
                uses[idx].append(flip)

        for idx, flips in uses.items():
            assert len(flips) == 2
            assert flips[0] != flips[1]

    def test_tetra_vertices(self):
        for k, pair in enumerate(EDGE_ORDER):
            assert PluckerTetra.tetra_vertices(k) == pair

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="Unknown face index"):
            PluckerTetra.edge_idx(-1, 0)
        with pytest.raises(ValueError, match="Unknown face edge index"):
            PluckerTetra.edge_idx(0, 3)
        with pytest.raises(ValueError, match="Unknown edge index"):
            PluckerTetra.tetra_vertices(6)


class TestFaceShareTable:
    """Test the edge face-share table."""

    def test_symmetric(self):
        share = constants.PLUCKER_FACE_SHARE
        np.testing.assert_array_equal(share, share.T)
        assert not np.any(np.diag(share))

    def test_matches_face_edges(self):
        """Two edges share a face iff both appear in some face's edge list."""
        face_edges = [
            {PluckerTetra.edge_idx(f, e)[0] for e in range(3)} for f in range(4)
        ]
        for e1 in range(6):
            for e2 in range(6):
                expected = e1 != e2 and any(
                    e1 in edges and e2 in edges for edges in face_edges
                )
                assert PluckerTetra.shares_face(e1, e2) == expected

    def test_opposite_edges_do_not_share(self):
        """0-1/2-3, 0-2/1-3 and 0-3/1-2 are the opposite pairs."""
        for e1, e2 in [(0, 5), (1, 4), (2, 3)]:
            assert not PluckerTetra.shares_face(e1, e2)


class TestTablesReadOnly:
    """Index tables are immutable constants."""

    @pytest.mark.parametrize("name", [
        "TETRA_FACE_VERTICES",
        "PLUCKER_FACE_EDGES",
        "PLUCKER_FACE_FLIPS",
        "PLUCKER_FACE_SHARE",
        "TETRA_EDGE_STARTS",
        "TETRA_EDGE_ENDS",
    ])
    def test_not_writeable(self, name):
        table = getattr(constants, name)
        with pytest.raises(ValueError):
            table[0] = 0


class TestSidedness:
    """Side products of a ray with an oriented tetrahedron's faces."""

    def test_entering_face_positive(self):
        """A ray entering through F3 sees three positive face edges."""
        t = Tetra(UNIT_TETRA)
        t.orient(OUTWARD)
        pt = PluckerTetra(t)
        ray = PluckerVec.from_ray([0.1, 0.1, -1.0], [0.0, 0.0, 1.0])

        signs = []
        for edge in range(3):
            idx, flip = pt.edge_idx(3, edge)
            signs.append(ray.sign_dot(pt[idx], flip)[1])

        assert signs == [1, 1, 1]
