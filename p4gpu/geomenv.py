"""Building mesh environments from a geometric scene, with reporting helpers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from p4gpu.shapes import Shape, scene_4layers, scene_env5m3, scene_nest_ndiams

Point = Sequence[float]

# Tolerance on the relative excess of summed partial volumes over a cell volume.
_VOLUME_TOLERANCE = 1.0e-10


class GeomScene(IntEnum):
    """Predefined geometric configurations."""

    ENV5M3 = 0
    """5 environments, some cells with 3 environments, about 20% void."""
    LAYERS4 = 1
    """4 diagonal layers, about 20% void."""
    NEST_NDIAMS = 2
    """N nested hollow diamonds plus the rest of the domain."""


def define_scene(scene: GeomScene, ndiam: int | None = None) -> list[Shape]:
    """Shapes of a predefined scene; one environment is built per shape."""
    scene = GeomScene(scene)
    if scene is GeomScene.ENV5M3:
        return scene_env5m3()
    if scene is GeomScene.LAYERS4:
        return scene_4layers()
    if ndiam is None:
        raise ValueError("the nested diamonds scene needs a number of diamonds")
    return scene_nest_ndiams(ndiam)


@dataclass(frozen=True)
class EnvironmentSet:
    """Environments laid on a mesh, one per shape, with partial volumes.

    ``env_cells[e]`` lists, in increasing order, the cells of environment
    ``e`` and ``env_volumes[e]`` / ``env_frac_vol[e]`` their partial volumes
    and volume fractions. Per-cell totals are in ``cell_volume``,
    ``cell_frac_vol`` and ``cell_nb_env``.
    """

    names: tuple[str, ...]
    env_cells: tuple[tuple[int, ...], ...]
    env_volumes: tuple[tuple[float, ...], ...]
    env_frac_vol: tuple[tuple[float, ...], ...]
    cell_volume: tuple[float, ...]
    cell_frac_vol: tuple[float, ...]
    cell_nb_env: tuple[int, ...]

    @property
    def nb_environment(self) -> int:
        return len(self.names)

    @property
    def active_cells(self) -> tuple[int, ...]:
        """Cells holding at least one environment."""
        return tuple(c for c, n in enumerate(self.cell_nb_env) if n > 0)

    @property
    def cell_env_counts(self) -> tuple[int, int, int]:
        """Number of empty, pure and mixed cells."""
        counts = [0, 0, 0]
        for n in self.cell_nb_env:
            counts[min(n, 2)] += 1
        return counts[0], counts[1], counts[2]

    @property
    def pure_impure_counts(self) -> tuple[tuple[int, int], ...]:
        """For each environment, its number of pure and of mixed cells."""
        return tuple(
            (
                sum(1 for c in cells if self.cell_nb_env[c] == 1),
                sum(1 for c in cells if self.cell_nb_env[c] > 1),
            )
            for cells in self.env_cells
        )

    def _visu(self, per_env: tuple[tuple[float, ...], ...]) -> list[list[float]]:
        table = [[0.0] * self.nb_environment for _ in self.cell_nb_env]
        for env_id, (cells, values) in enumerate(zip(self.env_cells, per_env)):
            for cell, value in zip(cells, values):
                table[cell][env_id] = value
        return table

    @property
    def volume_visu(self) -> list[list[float]]:
        """Per cell, the partial volume of each environment (0 when absent)."""
        return self._visu(self.env_volumes)

    @property
    def frac_vol_visu(self) -> list[list[float]]:
        """Per cell, the volume fraction of each environment (0 when absent)."""
        return self._visu(self.env_frac_vol)


def build_environments(
    shapes: Sequence[Shape],
    node_coords: Sequence[Point],
    cell_nodes: Sequence[Sequence[int]],
    cell_volumes: Sequence[float],
) -> EnvironmentSet:
    """Lay one environment per shape on the mesh.

    A cell belongs to a shape's environment when at least one of its nodes
    lies inside the shape; its partial volume is the cell volume times the
    share of its nodes inside.
    """
    if len(cell_nodes) != len(cell_volumes):
        raise ValueError(
            f"{len(cell_nodes)} cells but {len(cell_volumes)} cell volumes"
        )
    for cell, nodes in enumerate(cell_nodes):
        if not nodes:
            raise ValueError(f"cell {cell} has no node")
        if cell_volumes[cell] <= 0.0:
            raise ValueError(f"cell {cell} has a non-positive volume")

    env_cells: list[tuple[int, ...]] = []
    env_volumes: list[tuple[float, ...]] = []
    for shape in shapes:
        inside = shape.is_inside(node_coords)
        cells: list[int] = []
        volumes: list[float] = []
        for cell, nodes in enumerate(cell_nodes):
            nb_inside = sum(1 for node in nodes if inside[node])
            if nb_inside > 0:
                cells.append(cell)
                volumes.append(nb_inside * cell_volumes[cell] / len(nodes))
        env_cells.append(tuple(cells))
        env_volumes.append(tuple(volumes))

    env_frac_vol = tuple(
        tuple(v / cell_volumes[c] for c, v in zip(cells, volumes))
        for cells, volumes in zip(env_cells, env_volumes)
    )

    ncells = len(cell_nodes)
    vol_sum = [0.0] * ncells
    frac_sum = [0.0] * ncells
    nb_env = [0] * ncells
    for cells, volumes, fracs in zip(env_cells, env_volumes, env_frac_vol):
        for cell, volume, frac in zip(cells, volumes, fracs):
            vol_sum[cell] += volume
            frac_sum[cell] += frac
            nb_env[cell] += 1

    for cell in range(ncells):
        vol_ref = cell_volumes[cell]
        if (vol_sum[cell] - vol_ref) / vol_ref >= _VOLUME_TOLERANCE:
            raise ValueError(
                f"environment volumes of cell {cell} exceed the cell volume"
            )
        if frac_sum[cell] - 1.0 >= _VOLUME_TOLERANCE:
            raise ValueError(f"volume fractions of cell {cell} exceed 1")

    return EnvironmentSet(
        names=tuple(shape.name for shape in shapes),
        env_cells=tuple(env_cells),
        env_volumes=tuple(env_volumes),
        env_frac_vol=env_frac_vol,
        cell_volume=tuple(vol_sum),
        cell_frac_vol=tuple(frac_sum),
        cell_nb_env=tuple(nb_env),
    )


def str_ratio(part: int, tot: int) -> str:
    """Ratio ``part/tot`` truncated to thousandths, as ``ratio=<value>``."""
    if tot == 0:
        raise ValueError("total must not be zero")
    per_mille = int(1000 * part / tot)
    return f"ratio={per_mille / 1000.0}"


class MinMaxSumRed:
    """Min, max and sum of values across ranks, with display helpers."""

    def __init__(self, rank_values: Sequence[Sequence[float]]) -> None:
        if not rank_values:
            raise ValueError("at least one rank is needed")
        nvals = len(rank_values[0])
        if any(len(values) != nvals for values in rank_values):
            raise ValueError("every rank must hold the same number of values")
        self.comm_size = len(rank_values)
        columns = list(zip(*rank_values)) if nvals else []
        self.min_values = [min(col) for col in columns]
        self.max_values = [max(col) for col in columns]
        self.sum_values = [sum(col) for col in columns]
        self.min_ranks = [col.index(min(col)) for col in columns]
        self.max_ranks = [col.index(max(col)) for col in columns]

    def _average(self, idx: int) -> float:
        total = self.sum_values[idx]
        avg = total / self.comm_size
        return int(avg) if isinstance(total, int) else avg

    def str_min_max_avg(self, idx: int) -> str:
        return (
            f"[min={self.min_values[idx]}, max={self.max_values[idx]}, "
            f"avg={self._average(idx)}]"
        )

    def str_sum_min_max_avg(self, idx: int) -> str:
        return f"{self.sum_values[idx]} {self.str_min_max_avg(idx)}"