from collections import Counter
from itertools import product

import pytest

from p4gpu.node_cell import CartConnectivityNodeCell, SortCell


def _grid(nx, ny, nz):
    return (nx, ny, nz), (1, nx, nx * ny)


def _base_cell(i, j, k, nx, ny):
    return i + j * nx + k * nx * ny


def test_max_nb_cell():
    ncells, delta = _grid(3, 2, 1)
    assert CartConnectivityNodeCell(2, ncells, delta).max_nb_cell() == 4
    ncells, delta = _grid(2, 2, 2)
    assert CartConnectivityNodeCell(3, ncells, delta).max_nb_cell() == 8


@pytest.mark.parametrize("sort", [SortCell.CART, SortCell.TRIGO, SortCell.ARC])
def test_each_cell_seen_by_all_its_nodes_2d(sort):
    nx, ny = 3, 2
    ncells, delta = _grid(nx, ny, 1)
    conn = CartConnectivityNodeCell(2, ncells, delta, sort)
    counts = Counter()
    for i, j in product(range(nx + 1), range(ny + 1)):
        nc = conn.node_connectivity(_base_cell(i, j, 0, nx, ny), (i, j, 0))
        counts.update(c for c in nc if c != -1)
    assert set(counts) == set(range(nx * ny))
    assert all(v == conn.max_nb_cell() for v in counts.values())


@pytest.mark.parametrize("sort", [SortCell.CART, SortCell.TRIGO, SortCell.ARC])
def test_each_cell_seen_by_all_its_nodes_3d(sort):
    nx, ny, nz = 2, 3, 2
    ncells, delta = _grid(nx, ny, nz)
    conn = CartConnectivityNodeCell(3, ncells, delta, sort)
    counts = Counter()
    for i, j, k in product(range(nx + 1), range(ny + 1), range(nz + 1)):
        nc = conn.node_connectivity(_base_cell(i, j, k, nx, ny), (i, j, k))
        counts.update(c for c in nc if c != -1)
    assert set(counts) == set(range(nx * ny * nz))
    assert all(v == 8 for v in counts.values())


def test_corner_node_has_single_cell():
    ncells, delta = _grid(3, 2, 1)
    conn = CartConnectivityNodeCell(2, ncells, delta)
    nc = conn.node_connectivity(0, (0, 0, 0))
    assert [nc.cell(i) for i in range(4)] == [-1, -1, -1, 0]


def test_inner_matches_full_for_interior_node():
    nx, ny = 3, 3
    ncells, delta = _grid(nx, ny, 1)
    conn = CartConnectivityNodeCell(2, ncells, delta)
    base = _base_cell(1, 2, 0, nx, ny)
    full = list(conn.node_connectivity(base, (1, 2, 0)))
    inner = list(conn.inner_node_connectivity(base))
    assert full == inner
    assert -1 not in full


def test_orderings_are_permutations():
    nx, ny = 3, 3
    ncells, delta = _grid(nx, ny, 1)
    base = _base_cell(1, 1, 0, nx, ny)
    cart = list(CartConnectivityNodeCell(2, ncells, delta, SortCell.CART)
                .inner_node_connectivity(base))
    trigo = list(CartConnectivityNodeCell(2, ncells, delta, SortCell.TRIGO)
                 .inner_node_connectivity(base))
    arc = list(CartConnectivityNodeCell(2, ncells, delta, SortCell.ARC)
               .inner_node_connectivity(base))
    assert trigo == [cart[0], cart[1], cart[3], cart[2]]
    assert arc == [cart[2], cart[3], cart[1], cart[0]]


def test_errors():
    ncells, delta = _grid(3, 2, 1)
    with pytest.raises(ValueError):
        CartConnectivityNodeCell(1, ncells, delta)
    with pytest.raises(ValueError):
        CartConnectivityNodeCell(2, ncells, delta, SortCell.INVALID)
    conn = CartConnectivityNodeCell(2, ncells, delta)
    with pytest.raises(IndexError):
        conn.node_connectivity(0, (0, 0, 0)).cell(4)
    with pytest.raises(IndexError):
        conn.inner_node_connectivity(4).cell(-1)