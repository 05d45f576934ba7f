"""Cell to node connectivity on a Cartesian grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

Triplet = tuple[int, int, int]


class SortNode(IntEnum):
    """Ordering of the nodes of a cell."""

    CART = 0
    TRIGO = 1
    ARC = 2
    INVALID = -1


_DECA: dict[SortNode, tuple[Triplet, ...]] = {
    # Increasing Cartesian numbering.
    SortNode.CART: (
        (0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0),
        (0, 0, 1), (1, 0, 1), (0, 1, 1), (1, 1, 1),
    ),
    # Counter-clockwise in (X, Y) for Z=Zmin then Z=Zmax.
    SortNode.TRIGO: (
        (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
        (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
    ),
    # Upper left, upper right, lower right, lower left, then top Z layer.
    SortNode.ARC: (
        (0, 1, 0), (1, 1, 0), (1, 0, 0), (0, 0, 0),
        (0, 1, 1), (1, 1, 1), (1, 0, 1), (0, 0, 1),
    ),
}


@dataclass(frozen=True)
class CellNodeConnectivity:
    """Nodes of one cell, from its base node and the node strides."""

    base_node_id: int
    node_stride: Sequence[int]

    def node(self, inode: int) -> int:
        """Local id of the ``inode``-th node of the cell."""
        return self.base_node_id + self.node_stride[inode]


class CartConnectivityCellNode:
    """Cell to node connectivity for a given node ordering."""

    def __init__(
        self,
        dimension: int,
        node_delta3: Sequence[int],
        sort_node: SortNode = SortNode.CART,
    ) -> None:
        if dimension not in (1, 2, 3):
            raise ValueError(f"dimension must be 1, 2 or 3, got {dimension}")
        sort_node = SortNode(sort_node)
        if sort_node is SortNode.INVALID:
            raise ValueError("invalid node ordering")
        self.dimension = dimension
        self.sort_node = sort_node
        self._nb_node = 1 << dimension
        self._strides = tuple(
            sum(d * delta for d, delta in zip(deca, node_delta3))
            for deca in _DECA[sort_node][: self._nb_node]
        )

    @property
    def node_stride(self) -> tuple[int, ...]:
        """Offsets from a cell's base node to each of its nodes."""
        return self._strides

    def nb_node(self) -> int:
        """Number of nodes of a cell."""
        return self._nb_node

    def cell_connectivity(self, base_node_id: int) -> CellNodeConnectivity:
        """Nodes of the cell whose base node (i, j, k) is ``base_node_id``."""
        return CellNodeConnectivity(base_node_id, self._strides)