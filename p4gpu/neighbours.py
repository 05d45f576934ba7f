"""Neighbouring cells of a cell in a 2D or 3D Cartesian grid."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from p4gpu.stencil import NULL_ID

Triplet = tuple[int, int, int]


class CellPos2D(IntEnum):
    """Position of a neighbouring cell relative to a central cell in 2D."""

    SW = 0
    S = 1
    SE = 2
    E = 3
    NE = 4
    N = 5
    NW = 6
    W = 7
    C = 8


class CellPos3D(IntEnum):
    """Position of a neighbouring cell relative to a central cell in 3D.

    Each letter gives the offset along X, Y then Z: L(eft) is -1,
    C(enter) is 0 and R(ight) is +1. ``C`` repeats the centre.
    """

    LLL = 0
    CLL = 1
    RLL = 2
    LLC = 3
    CLC = 4
    RLC = 5
    LLR = 6
    CLR = 7
    RLR = 8
    LCL = 9
    CCL = 10
    RCL = 11
    LCC = 12
    CCC = 13
    RCC = 14
    LCR = 15
    CCR = 16
    RCR = 17
    LRL = 18
    CRL = 19
    RRL = 20
    LRC = 21
    CRC = 22
    RRC = 23
    LRR = 24
    CRR = 25
    RRR = 26
    C = 27


_DECAL_2D: tuple[Triplet, ...] = (
    (-1, -1, 0),  # SW
    (0, -1, 0),  # S
    (1, -1, 0),  # SE
    (1, 0, 0),  # E
    (1, 1, 0),  # NE
    (0, 1, 0),  # N
    (-1, 1, 0),  # NW
    (-1, 0, 0),  # W
    (0, 0, 0),  # C
)

_STEP = {"L": -1, "C": 0, "R": 1}
_DECAL_3D: tuple[Triplet, ...] = tuple(
    (0, 0, 0)
    if pos is CellPos3D.C
    else (_STEP[pos.name[0]], _STEP[pos.name[1]], _STEP[pos.name[2]])
    for pos in CellPos3D
)

_DECALS = {2: _DECAL_2D, 3: _DECAL_3D}


def _decal_table(dim: int) -> tuple[Triplet, ...]:
    try:
        return _DECALS[dim]
    except KeyError:
        raise ValueError(f"neighbour cells are defined in 2D and 3D only, got {dim}") from None


def is_valid_offset(
    dim: int, idx3: Sequence[int], decal3: Sequence[int], ncellsm1: Sequence[int]
) -> bool:
    """Whether shifting ``idx3`` by ``decal3`` stays in the grid on the first ``dim`` axes."""
    for d in range(dim):
        shift = decal3[d]
        if shift < 0 and idx3[d] <= 0:
            return False
        if shift > 0 and idx3[d] >= ncellsm1[d]:
            return False
    return True


def _apply_bc_2d(adj: list[int]) -> None:
    P = CellPos2D
    if adj[P.S] == NULL_ID:
        adj[P.SW], adj[P.S], adj[P.SE] = adj[P.W], adj[P.C], adj[P.E]
    if adj[P.E] == NULL_ID:
        adj[P.SE], adj[P.E], adj[P.NE] = adj[P.S], adj[P.C], adj[P.N]
    if adj[P.N] == NULL_ID:
        adj[P.NE], adj[P.N], adj[P.NW] = adj[P.E], adj[P.C], adj[P.W]
    if adj[P.W] == NULL_ID:
        adj[P.NW], adj[P.W], adj[P.SW] = adj[P.N], adj[P.C], adj[P.S]


def _apply_bc_3d(adj: list[int]) -> None:
    # Bottom (Y = -1 plane) copied from the Y = 0 plane.
    if adj[4] == NULL_ID:
        for ii in range(9):
            adj[ii] = adj[ii + 9]
    # Top (Y = +1 plane) copied from the Y = 0 plane.
    if adj[22] == NULL_ID:
        for ii in range(18, 27):
            adj[ii] = adj[ii - 9]
    # Right (X = +1) copied from X = 0.
    if adj[14] == NULL_ID:
        for ii in range(2, 27, 3):
            adj[ii] = adj[ii - 1]
    # Left (X = -1) copied from X = 0.
    if adj[12] == NULL_ID:
        for ii in range(0, 27, 3):
            adj[ii] = adj[ii + 1]
    # Front (Z = -1) copied from Z = 0.
    if adj[10] == NULL_ID:
        for base in (0, 9, 18):
            for ii in range(base, base + 3):
                adj[ii] = adj[ii + 3]
    # Back (Z = +1) copied from Z = 0.
    if adj[16] == NULL_ID:
        for base in (6, 15, 24):
            for ii in range(base, base + 3):
                adj[ii] = adj[ii - 3]


def apply_bc(dim: int, adj_cells: Sequence[int]) -> list[int]:
    """Replace missing neighbours at the domain boundary by mirrored inner ones."""
    table = _decal_table(dim)
    if len(adj_cells) < len(table):
        raise ValueError(
            f"expected at least {len(table)} neighbour ids, got {len(adj_cells)}"
        )
    adj = list(adj_cells)
    if dim == 2:
        _apply_bc_2d(adj)
    else:
        _apply_bc_3d(adj)
    return adj


class CartNeighCells:
    """Finds the local ids of the cells surrounding a cell."""

    def __init__(self, dim: int, ncells: Sequence[int], delta3: Sequence[int]) -> None:
        self._decal = _decal_table(dim)
        if len(ncells) < dim or len(delta3) != 3:
            raise ValueError("ncells needs one count per dimension and delta3 three deltas")
        self.dim = dim
        self.ncellsm1 = tuple(ncells[d] - 1 if d < dim else 0 for d in range(3))
        self.delta3 = tuple(delta3)
        self._offsets = [
            sum(dec * delta for dec, delta in zip(decal, self.delta3))
            for decal in self._decal
        ]

    @property
    def stencil_size(self) -> int:
        """Number of neighbour positions returned for a cell."""
        return len(self._decal)

    def neigh_cells(self, cell_id: int, idx3: Sequence[int]) -> list[int]:
        """Neighbour ids by position; ``-1`` where no cell exists."""
        return [
            cell_id + offset
            if is_valid_offset(self.dim, idx3, decal, self.ncellsm1)
            else NULL_ID
            for decal, offset in zip(self._decal, self._offsets)
        ]

    def neigh_cells_bc(self, cell_id: int, idx3: Sequence[int]) -> list[int]:
        """Neighbour ids with boundary conditions applied at the domain edges."""
        return apply_bc(self.dim, self.neigh_cells(cell_id, idx3))