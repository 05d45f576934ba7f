"""Geometric shapes deciding whether points lie inside them, and preset scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

Point = Sequence[float]


class Shape(ABC):
    """A named region of space."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the shape."""

    def is_inside(self, points: Iterable[Point]) -> list[bool]:
        """Inside flag for each point."""
        return [self.contains(point) for point in points]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ShapeLayer3D(Shape):
    """Slab between two planes, each crossing the axes at a given point's coordinates."""

    def __init__(self, name: str, pmin: Point, pmax: Point) -> None:
        super().__init__(name)
        self._cmin = self._coefficients(pmin)
        self._cmax = self._coefficients(pmax)

    @staticmethod
    def _coefficients(p: Point) -> tuple[float, float, float]:
        px, py, pz = p
        if px == 0.0 or py == 0.0:
            raise ValueError(f"x and y of a layer point cannot be zero, got {tuple(p)}")
        return -pz / px, -pz / py, pz

    def contains(self, point: Point) -> bool:
        x, y, z = point
        z_min = self._cmin[0] * x + self._cmin[1] * y + self._cmin[2]
        z_max = self._cmax[0] * x + self._cmax[1] * y + self._cmax[2]
        return z_min <= z < z_max


class ShapeSphere(Shape):
    """Closed ball."""

    def __init__(self, name: str, center: Point, radius: float) -> None:
        super().__init__(name)
        self.center = tuple(center)
        self._rad2 = radius * radius

    def contains(self, point: Point) -> bool:
        d2 = sum((p - c) ** 2 for p, c in zip(point, self.center))
        return d2 <= self._rad2


class ShapeDiamond3D(Shape):
    """Hollow diamond: ``rmin <= |x-x0|+|y-y0|+|z-z0| < rmax``."""

    def __init__(self, name: str, center: Point, rmin: float, rmax: float) -> None:
        super().__init__(name)
        self.center = tuple(center)
        self.rmin = rmin
        self.rmax = rmax

    def contains(self, point: Point) -> bool:
        d = sum(abs(p - c) for p, c in zip(point, self.center))
        return self.rmin <= d < self.rmax


class ShapeInter(Shape):
    """Intersection of two shapes."""

    def __init__(self, name: str, first: Shape, second: Shape) -> None:
        super().__init__(name)
        self.first = first
        self.second = second

    def contains(self, point: Point) -> bool:
        return self.first.contains(point) and self.second.contains(point)


class ShapeNot(Shape):
    """Complement of a shape."""

    def __init__(self, name: str, shape: Shape) -> None:
        super().__init__(name)
        self.shape = shape

    def contains(self, point: Point) -> bool:
        return not self.shape.contains(point)


_LAYER_POINTS = (
    (-0.5, -0.5, -0.5),
    (0.5, 0.5, 0.5),
    (0.7, 0.7, 0.7),
    (0.9, 0.9, 0.9),
    (1.9, 1.9, 1.9),
)


def _layers(points: Sequence[Point]) -> list[Shape]:
    return [
        ShapeLayer3D(f"MIL{ish}", lo, hi)
        for ish, (lo, hi) in enumerate(zip(points, points[1:]))
    ]


def scene_env5m3() -> list[Shape]:
    """Five environments: three layers, then a thick layer split by a sphere."""
    shapes = _layers(_LAYER_POINTS[:4])
    nb_sh = len(shapes)
    lo, hi = _LAYER_POINTS[3], _LAYER_POINTS[4]
    center, radius = (1.0, 0.5, 0.0), 1.0

    name = f"MIL{nb_sh}"
    shapes.append(
        ShapeInter(
            name,
            ShapeLayer3D(name, lo, hi),
            ShapeSphere(name, center, radius),
        )
    )
    name = f"MIL{nb_sh + 1}"
    shapes.append(
        ShapeInter(
            name,
            ShapeLayer3D(name, lo, hi),
            ShapeNot(name, ShapeSphere(name, center, radius)),
        )
    )
    return shapes


def scene_4layers() -> list[Shape]:
    """Four diagonal layers, the last one thicker."""
    return _layers(_LAYER_POINTS)


def scene_nest_ndiams(ndiam: int) -> list[Shape]:
    """``ndiam`` nested hollow diamonds plus the rest of the domain."""
    if ndiam < 1:
        raise ValueError(f"at least one diamond is needed, got {ndiam}")
    rmin, rmax = 0.0, 1.0
    delta = (rmax - rmin) / ndiam
    bounds = [rmin] + [rmin + i * delta for i in range(1, ndiam)] + [rmax]
    center = (0.5, 0.5, 0.5)
    shapes: list[Shape] = [
        ShapeDiamond3D(f"MIL{ish}", center, bounds[ish], bounds[ish + 1])
        for ish in range(ndiam)
    ]
    name = f"MIL{ndiam}"
    shapes.append(ShapeNot(name, ShapeDiamond3D(name, center, rmin, rmax)))
    return shapes