"""Directional stencils of local ids around an item of a Cartesian grid."""

from __future__ import annotations

NULL_ID = -1


class AsymStencilDirItem:
    """Local ids of the items in layers [min_layer, max_layer] around an item.

    Layer 0 is the base item. Layers falling outside the grid in the
    direction hold ``-1``.
    """

    def __init__(
        self,
        item_id: int,
        idx_dir: int,
        nitemsm1_dir: int,
        delta_dir: int,
        min_layer: int,
        max_layer: int,
    ) -> None:
        if min_layer > max_layer:
            raise ValueError(
                f"empty layer range [{min_layer}, {max_layer}]"
            )
        self.min_layer = min_layer
        self.max_layer = max_layer
        idx_min = max(0, idx_dir + min_layer)
        idx_max = min(nitemsm1_dir, idx_dir + max_layer)
        self._sten_min = idx_min - idx_dir
        self._sten_max = idx_max - idx_dir
        self._ids = [
            item_id + ilayer * delta_dir
            if self._sten_min <= ilayer <= self._sten_max
            else NULL_ID
            for ilayer in range(min_layer, max_layer + 1)
        ]

    def __call__(self, ilayer: int) -> int:
        if not self.min_layer <= ilayer <= self.max_layer:
            raise IndexError(
                f"layer {ilayer} outside [{self.min_layer}, {self.max_layer}]"
            )
        return self._ids[ilayer - self.min_layer]

    def extent(self) -> int:
        """Number of layers, base item included."""
        return self.max_layer - self.min_layer + 1

    def nb_valid_item(self) -> int:
        """Number of layers holding an existing item."""
        return self._sten_max - self._sten_min + 1

    def valid_min(self) -> int:
        """Lowest layer holding an existing item."""
        return self._sten_min

    def valid_max(self) -> int:
        """Highest layer holding an existing item."""
        return self._sten_max


class CartStencilDirItem(AsymStencilDirItem):
    """Symmetric stencil of ``nlayer`` items on each side of a central item."""

    def __init__(
        self, item_id: int, idx_dir: int, nitemsm1_dir: int, delta_dir: int, nlayer: int
    ) -> None:
        super().__init__(item_id, idx_dir, nitemsm1_dir, delta_dir, -nlayer, nlayer)
        self.nlayer = nlayer

    def central_id(self) -> int:
        return self(0)

    def previous_id(self) -> int:
        return self(-1)

    def next_id(self) -> int:
        return self(1)

    def prev_previous_id(self) -> int:
        return self(-2)

    def next_next_id(self) -> int:
        return self(2)


def _check_previous(ilayer: int, nlayer: int) -> None:
    if not -nlayer <= ilayer <= -1:
        raise IndexError(f"layer {ilayer} not in [{-nlayer}, -1]")


def _check_next(ilayer: int, nlayer: int) -> None:
    if not 1 <= ilayer <= nlayer:
        raise IndexError(f"layer {ilayer} not in [1, {nlayer}]")


class PosAsymStencilDirItem(AsymStencilDirItem):
    """Stencil where the base item is the first item after the centre.

    ``next_id(1)`` is the base item; ``previous_id(-1)`` is the one before it.
    """

    def __init__(
        self, item_id: int, idx_dir: int, nitemsm1_dir: int, delta_dir: int, nlayer: int
    ) -> None:
        super().__init__(item_id, idx_dir, nitemsm1_dir, delta_dir, -nlayer, nlayer - 1)
        self.nlayer = nlayer

    def base_id(self) -> int:
        return self(0)

    def previous_id(self, ilayer: int) -> int:
        _check_previous(ilayer, self.nlayer)
        return self(ilayer)

    def next_id(self, ilayer: int) -> int:
        _check_next(ilayer, self.nlayer)
        return self(ilayer - 1)

    def valid_min(self) -> int:
        return self._sten_min

    def valid_max(self) -> int:
        return self._sten_max + 1


class NegAsymStencilDirItem(AsymStencilDirItem):
    """Stencil where the base item is the last item before the centre.

    ``previous_id(-1)`` is the base item; ``next_id(1)`` is the one after it.
    """

    def __init__(
        self, item_id: int, idx_dir: int, nitemsm1_dir: int, delta_dir: int, nlayer: int
    ) -> None:
        super().__init__(item_id, idx_dir, nitemsm1_dir, delta_dir, -nlayer + 1, nlayer)
        self.nlayer = nlayer

    def base_id(self) -> int:
        return self(0)

    def previous_id(self, ilayer: int) -> int:
        _check_previous(ilayer, self.nlayer)
        return self(ilayer + 1)

    def next_id(self, ilayer: int) -> int:
        _check_next(ilayer, self.nlayer)
        return self(ilayer)

    def valid_min(self) -> int:
        return self._sten_min - 1

    def valid_max(self) -> int:
        return self._sten_max