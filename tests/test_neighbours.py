import pytest

from p4gpu.neighbours import (
    CartNeighCells,
    CellPos2D,
    CellPos3D,
    apply_bc,
    is_valid_offset,
)

N2 = 3


def cid2(i, j):
    return i + N2 * j


def cid3(i, j, k):
    return i + 3 * j + 9 * k


def make_2d():
    return CartNeighCells(2, (N2, N2), (1, N2, 0))


def make_3d():
    return CartNeighCells(3, (3, 3, 3), (1, 3, 9))


def test_2d_interior_cell_has_all_neighbours():
    neigh = make_2d().neigh_cells(cid2(1, 1), (1, 1, 0))
    P = CellPos2D
    expected = {
        P.SW: cid2(0, 0),
        P.S: cid2(1, 0),
        P.SE: cid2(2, 0),
        P.E: cid2(2, 1),
        P.NE: cid2(2, 2),
        P.N: cid2(1, 2),
        P.NW: cid2(0, 2),
        P.W: cid2(0, 1),
        P.C: cid2(1, 1),
    }
    assert len(neigh) == len(CellPos2D)
    for pos, value in expected.items():
        assert neigh[pos] == value


def test_2d_corner_cell_marks_missing_neighbours():
    neigh = make_2d().neigh_cells(cid2(0, 0), (0, 0, 0))
    P = CellPos2D
    for pos in (P.SW, P.S, P.SE, P.W, P.NW):
        assert neigh[pos] == -1
    assert neigh[P.E] == cid2(1, 0)
    assert neigh[P.N] == cid2(0, 1)
    assert neigh[P.NE] == cid2(1, 1)
    assert neigh[P.C] == cid2(0, 0)


def test_2d_bc_fills_corner_with_existing_cells():
    neigh = make_2d().neigh_cells_bc(cid2(0, 0), (0, 0, 0))
    P = CellPos2D
    assert -1 not in neigh
    assert neigh[P.S] == cid2(0, 0)
    assert neigh[P.W] == cid2(0, 0)
    assert neigh[P.SW] == cid2(0, 0)
    assert neigh[P.SE] == neigh[P.E]
    assert neigh[P.NW] == neigh[P.N]


def test_2d_bc_leaves_interior_unchanged():
    grid = make_2d()
    assert grid.neigh_cells_bc(cid2(1, 1), (1, 1, 0)) == grid.neigh_cells(cid2(1, 1), (1, 1, 0))


def test_3d_interior_cell():
    grid = make_3d()
    centre = cid3(1, 1, 1)
    neigh = grid.neigh_cells(centre, (1, 1, 1))
    assert len(neigh) == len(CellPos3D)
    assert neigh[CellPos3D.CCC] == centre
    assert neigh[CellPos3D.C] == centre
    assert neigh[CellPos3D.LLL] == cid3(0, 0, 0)
    assert neigh[CellPos3D.RRR] == cid3(2, 2, 2)
    assert neigh[CellPos3D.RCC] == cid3(2, 1, 1)
    assert sorted(neigh[:27]) == list(range(27))


def test_3d_corner_then_bc():
    grid = make_3d()
    raw = grid.neigh_cells(0, (0, 0, 0))
    assert raw[CellPos3D.LLL] == -1
    assert raw[CellPos3D.RRR] == cid3(1, 1, 1)
    fixed = grid.neigh_cells_bc(0, (0, 0, 0))
    assert -1 not in fixed
    assert fixed[CellPos3D.LLL] == 0
    assert fixed[CellPos3D.CCC] == 0


def test_3d_bc_interior_unchanged():
    grid = make_3d()
    centre = cid3(1, 1, 1)
    assert grid.neigh_cells_bc(centre, (1, 1, 1)) == grid.neigh_cells(centre, (1, 1, 1))


@pytest.mark.parametrize(
    "idx3, decal3, expected",
    [
        ((0, 0, 0), (-1, 0, 0), False),
        ((1, 0, 0), (-1, 0, 0), True),
        ((2, 1, 0), (1, 0, 0), False),
        ((1, 2, 0), (0, 1, 0), False),
        ((1, 1, 0), (1, 1, 0), True),
        ((0, 0, 0), (0, 0, 0), True),
    ],
)
def test_is_valid_offset_2d(idx3, decal3, expected):
    assert is_valid_offset(2, idx3, decal3, (2, 2, 0)) is expected


def test_is_valid_offset_ignores_axes_beyond_dim():
    assert is_valid_offset(2, (1, 1, 0), (0, 0, -1), (2, 2, 0)) is True
    assert is_valid_offset(3, (1, 1, 0), (0, 0, -1), (2, 2, 2)) is False


def test_apply_bc_does_not_mutate_input():
    adj = make_2d().neigh_cells(0, (0, 0, 0))
    before = list(adj)
    result = apply_bc(2, adj)
    assert adj == before
    assert -1 not in result


def test_unsupported_dimension():
    with pytest.raises(ValueError):
        CartNeighCells(1, (3,), (1, 0, 0))
    with pytest.raises(ValueError):
        apply_bc(1, [0, 0, 0])


def test_apply_bc_too_short():
    with pytest.raises(ValueError):
        apply_bc(2, [0, 1, 2])