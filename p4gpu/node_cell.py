"""Node to cell connectivity on a Cartesian grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from p4gpu.stencil import NULL_ID

Triplet = tuple[int, int, int]


class SortCell(IntEnum):
    """Ordering of the cells connected to a node."""

    CART = 0
    TRIGO = 1
    ARC = 2
    INVALID = -1


# For a node (i, j, k) the base cell is cell (i, j, k); these are the index
# shifts from the base cell to every cell sharing the node.
_DECA: dict[tuple[SortCell, int], tuple[Triplet, ...]] = {
    # 2 | 3
    # -i,j-
    # 0 | 1
    (SortCell.CART, 2): ((-1, -1, 0), (0, -1, 0), (-1, 0, 0), (0, 0, 0)),
    (SortCell.CART, 3): (
        (-1, -1, -1), (0, -1, -1), (-1, 0, -1), (0, 0, -1),
        (-1, -1, 0), (0, -1, 0), (-1, 0, 0), (0, 0, 0),
    ),
    # 3 | 2
    # -i,j-
    # 0 | 1
    (SortCell.TRIGO, 2): ((-1, -1, 0), (0, -1, 0), (0, 0, 0), (-1, 0, 0)),
    (SortCell.TRIGO, 3): (
        (-1, -1, -1), (0, -1, -1), (0, 0, -1), (-1, 0, -1),
        (-1, -1, 0), (0, -1, 0), (0, 0, 0), (-1, 0, 0),
    ),
    # 0 | 1
    # -i,j-
    # 3 | 2
    (SortCell.ARC, 2): ((-1, 0, 0), (0, 0, 0), (0, -1, 0), (-1, -1, 0)),
    (SortCell.ARC, 3): (
        (-1, 0, -1), (0, 0, -1), (0, -1, -1), (-1, -1, -1),
        (-1, 0, 0), (0, 0, 0), (0, -1, 0), (-1, -1, 0),
    ),
}


def _check_icell(icell: int, count: int) -> None:
    if not 0 <= icell < count:
        raise IndexError(f"cell index {icell} outside [0, {count})")


@dataclass(frozen=True)
class NodeCellConnectivity:
    """Cells around one node; missing cells at the grid border are ``-1``."""

    cell_node_id: int
    idx3: Triplet
    ncells: Triplet
    cell_stride: Sequence[int]
    deca: Sequence[Triplet]

    def _is_valid(self, icell: int) -> bool:
        return all(
            0 <= self.idx3[d] + self.deca[icell][d] < self.ncells[d] for d in range(3)
        )

    def cell(self, icell: int) -> int:
        """Local id of the ``icell``-th cell of the node, or ``-1``."""
        _check_icell(icell, len(self.cell_stride))
        if self._is_valid(icell):
            return self.cell_node_id + self.cell_stride[icell]
        return NULL_ID

    def __iter__(self):
        return (self.cell(icell) for icell in range(len(self.cell_stride)))


@dataclass(frozen=True)
class InnerNodeCellConnectivity:
    """Cells around an inner node, where every surrounding cell exists."""

    cell_node_id: int
    cell_stride: Sequence[int]

    def cell(self, icell: int) -> int:
        """Local id of the ``icell``-th cell of the node."""
        _check_icell(icell, len(self.cell_stride))
        return self.cell_node_id + self.cell_stride[icell]

    def __iter__(self):
        return (self.cell(icell) for icell in range(len(self.cell_stride)))


class CartConnectivityNodeCell:
    """Node to cell connectivity for a given cell ordering."""

    def __init__(
        self,
        dimension: int,
        ncells: Sequence[int],
        cell_delta3: Sequence[int],
        sort_cell: SortCell = SortCell.CART,
    ) -> None:
        sort_cell = SortCell(sort_cell)
        deca = _DECA.get((sort_cell, dimension))
        if deca is None:
            raise ValueError(
                f"unsupported ordering {sort_cell.name} or dimension {dimension}"
            )
        if len(ncells) != 3 or len(cell_delta3) != 3:
            raise ValueError("ncells and cell_delta3 need three values each")
        self.dimension = dimension
        self.sort_cell = sort_cell
        self.ncells: Triplet = tuple(ncells)
        self._deca = deca
        self._strides = tuple(
            sum(d * delta for d, delta in zip(shift, cell_delta3)) for shift in deca
        )

    @property
    def cell_stride(self) -> tuple[int, ...]:
        """Offsets from a node's base cell to each of its cells."""
        return self._strides

    def max_nb_cell(self) -> int:
        """Largest number of cells a node can be connected to."""
        return len(self._strides)

    def node_connectivity(
        self, cell_node_id: int, idx3: Sequence[int]
    ) -> NodeCellConnectivity:
        """Cells of the node (i, j, k) whose base cell id is ``cell_node_id``."""
        return NodeCellConnectivity(
            cell_node_id, tuple(idx3), self.ncells, self._strides, self._deca
        )

    def inner_node_connectivity(self, cell_node_id: int) -> InnerNodeCellConnectivity:
        """Cells of an inner node whose base cell id is ``cell_node_id``."""
        return InnerNodeCellConnectivity(cell_node_id, self._strides)