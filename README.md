# p4gpu

Building blocks for computations on structured (Cartesian) grids of cells,
faces and nodes, where local identifiers follow `i + j*delta1 + k*delta2`.
Missing items (outside the grid) are reported as `-1`.

## What is inside

- `p4gpu.sentinel` – `SentinelArray`, a fixed-capacity array whose visible
  length (the sentinel) can be smaller than its capacity. It supports
  `len`, iteration, `reversed`, indexing, `at`, `back`, `assign` and
  `set_sentinel`.
- `p4gpu.stencil` – directional stencils of local ids around an item:
  `AsymStencilDirItem` (layers `[min_layer, max_layer]`),
  `CartStencilDirItem` (symmetric), `PosAsymStencilDirItem` and
  `NegAsymStencilDirItem` (stencils around a face, based on the item just
  after or just before it). `NULL_ID` is `-1`.
- `p4gpu.neighbours` – `CartNeighCells`, the 9-cell (2D) or 28-position
  (3D, `CellPos3D`) neighbourhood of a cell, plus `is_valid_offset` and
  `apply_bc`, which replaces missing neighbours at the domain edge by
  mirrored inner ones. Positions are named by `CellPos2D` and `CellPos3D`.
- `p4gpu.cell_node` – `CartConnectivityCellNode` and
  `CellNodeConnectivity`: the nodes of a cell, ordered by `SortNode`
  (`CART`, `TRIGO` or `ARC`).
- `p4gpu.node_cell` – `CartConnectivityNodeCell`, `NodeCellConnectivity`
  and `InnerNodeCellConnectivity`: the cells around a node, ordered by
  `SortCell`, with `-1` for cells outside the grid.
- `p4gpu.shapes` – shapes with `contains` and `is_inside`:
  `ShapeLayer3D`, `ShapeSphere`, `ShapeDiamond3D`, `ShapeInter`,
  `ShapeNot`; and the scenes `scene_env5m3`, `scene_4layers` and
  `scene_nest_ndiams`.
- `p4gpu.geomenv` – `GeomScene` and `define_scene`;
  `build_environments`, which lays one environment per shape on a mesh
  given node coordinates, cell-to-node lists and cell volumes, and returns
  an `EnvironmentSet` (cells, partial volumes, volume fractions, per-cell
  totals, active cells, empty/pure/mixed counts, visualisation tables);
  `str_ratio` and `MinMaxSumRed` for min/max/sum/average reports over
  per-rank values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from p4gpu.stencil import CartStencilDirItem

# Cell 12 sits at index 0 along a direction with 5 cells and stride 4.
st = CartStencilDirItem(12, 0, 4, 4, 2)
st.previous_id()   # -1: nothing before the first cell
st.next_id()       # 16
st.next_next_id()  # 20
```

```python
from p4gpu.neighbours import CartNeighCells

# 3x3 grid in 2D, cell deltas (1, 3, 9); cell 0 is the lower-left corner.
neigh = CartNeighCells(2, (3, 3, 1), (1, 3, 9))
neigh.neigh_cells(0, (0, 0, 0))     # [-1, -1, -1, 1, 4, 3, -1, -1, 0]
neigh.neigh_cells_bc(0, (0, 0, 0))  # [0, 0, 1, 1, 4, 3, 3, 0, 0]
```

```python
from p4gpu.shapes import ShapeSphere

sphere = ShapeSphere("ball", (0.0, 0.0, 0.0), 1.0)
sphere.contains((0.5, 0.5, 0.5))          # True
sphere.is_inside([(0, 0, 0), (2, 0, 0)])  # [True, False]
```

```python
from p4gpu.geomenv import MinMaxSumRed, str_ratio

red = MinMaxSumRed([[1, 10], [3, 20]])  # two ranks, two values each
red.str_sum_min_max_avg(0)  # "4 [min=1, max=3, avg=2]"
str_ratio(1, 3)             # "ratio=0.333"
```

## What it does not do

The package works on plain integers, triplets and sequences. It holds no
mesh: it does not generate grids, enumerate or group cells, faces and
nodes, compute cell volumes, or map `(i, j, k)` to local ids for you; the
caller supplies ids, indices, counts and deltas. It has no command-line
program, no parallel communication (per-rank values are passed to
`MinMaxSumRed` directly) and no output files for visualisation.