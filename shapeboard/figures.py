"""Figures drawn on the board: their geometry, measures and drawing primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

BOUNDS = (-500.0, -500.0, 1000.0, 1000.0)

_KINDS = frozenset({"ellipse", "rect", "polygon", "line"})


@dataclass(frozen=True)
class Primitive:
    """One drawing operation in item coordinates.

    ``coords`` holds ``(x, y, w, h)`` for ``ellipse`` and ``rect``,
    ``(x1, y1, x2, y2)`` for ``line`` and flattened vertex pairs for ``polygon``.
    """

    kind: str
    coords: tuple[float, ...]
    filled: bool = False

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown primitive kind: {self.kind!r}")
        if self.kind in ("ellipse", "rect", "line") and len(self.coords) != 4:
            raise ValueError(f"{self.kind} needs exactly 4 coordinates")
        if self.kind == "polygon" and len(self.coords) % 2:
            raise ValueError("polygon needs an even number of coordinates")

    @property
    def vertices(self) -> list[tuple[float, float]]:
        """Coordinates taken pairwise as points."""
        pairs = iter(self.coords)
        return list(zip(pairs, pairs))


def _polygon(points: list[tuple[int, int]]) -> Primitive:
    return Primitive("polygon", tuple(c for point in points for c in point))


@dataclass(eq=False)
class Figure:
    """A figure item with its adjustable dimensions and placement.

    ``scale`` multiplies the measures; ``dot_size`` is the dot radius used by
    hand-drawn shapes. ``x``, ``y``, ``rotation`` and ``origin`` place the item
    on the scene, and ``center`` is the point reported as its centre of mass.
    """

    radius: float = 100.0
    radius1: float = 50.0
    radius2: float = 50.0
    length: float = 200.0
    width: float = 100.0
    size: float = 50.0
    dot_size: float = 1.0
    scale: float = 1.0
    center: tuple[int, int] = (0, 0)
    flag: bool = True
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    origin: tuple[float, float] = (0.0, 0.0)

    def area(self) -> float:
        return 0.0

    def perimeter(self) -> float:
        return 0.0

    def primitives(self) -> list[Primitive]:
        """Drawing operations that render the figure."""
        return []

    def bounding_rect(self) -> tuple[float, float, float, float]:
        return BOUNDS


class Circle(Figure):
    def area(self) -> float:
        return self.scale * self.scale * math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return self.scale * 2 * math.pi * self.radius

    def primitives(self) -> list[Primitive]:
        r = self.radius
        return [Primitive("ellipse", (int(-r / 2), int(-r / 2), int(r), int(r)))]


class Ellipse(Figure):
    def area(self) -> float:
        return self.scale * self.scale * math.pi * self.radius * self.radius / 2

    def perimeter(self) -> float:
        r = self.radius
        return self.scale * (math.pi * r * r / 2 + r / 2) / (r * 3 / 2) * 4

    def primitives(self) -> list[Primitive]:
        r = self.radius
        return [
            Primitive(
                "ellipse",
                (int(-r / 2 - r / 4), int(-r / 2), int(r + r / 2), int(r)),
            )
        ]


class Hexagon(Figure):
    def area(self) -> float:
        r = self.radius
        return self.scale * self.scale * 3 * r * r * math.sqrt(3) / 2

    def perimeter(self) -> float:
        return 6 * self.radius * self.scale

    def primitives(self) -> list[Primitive]:
        r = self.radius
        h = r * math.sqrt(3) / 2
        corners = [(-r, 0), (-r / 2, h), (r / 2, h), (r, 0), (r / 2, -h), (-r / 2, -h)]
        return [_polygon([(int(px), int(py)) for px, py in corners])]


class Rectangle(Figure):
    def area(self) -> float:
        return self.scale * self.scale * self.length * self.width

    def perimeter(self) -> float:
        return 2 * self.scale * self.length + 2 * self.scale * self.width

    def primitives(self) -> list[Primitive]:
        a, b = self.length, self.width
        return [Primitive("rect", (int(-a / 2), int(-b / 2), int(a), int(b)))]


class Square(Figure):
    def area(self) -> float:
        return self.scale * self.scale * self.size * self.size

    def perimeter(self) -> float:
        return 4 * self.size * self.scale

    def primitives(self) -> list[Primitive]:
        s = self.size
        return [Primitive("rect", (int(-s / 2), int(-s / 2), int(s), int(s)))]


class Triangle(Figure):
    def area(self) -> float:
        return self.scale * self.scale * (self.size * self.size * math.sqrt(3)) / 4

    def perimeter(self) -> float:
        return 3 * self.size * self.scale

    def primitives(self) -> list[Primitive]:
        h = self.size * math.sqrt(3)
        return [_polygon([(int(-h), int(h)), (0, int(-h)), (int(h), int(h))])]


def star_points(points: int, radius1: float, radius2: float) -> list[tuple[int, int]]:
    """Outline of a star with ``points`` tips, closed by repeating the first vertex.

    ``radius1`` stretches the star vertically and ``radius2`` horizontally; the
    inner vertices lie at half those radii. Coordinates are truncated to integers.
    """
    if points < 1:
        raise ValueError("a star needs at least one tip")
    step = 2 * math.pi / points
    half = math.pi / points
    outline: list[tuple[int, int]] = []
    for i in range(points):
        angle = step * i
        outline.append((int(-radius2 * math.sin(angle)), int(-radius1 * math.cos(angle))))
        outline.append(
            (
                int(-radius2 / 2 * math.sin(angle + half)),
                int(-radius1 / 2 * math.cos(angle + half)),
            )
        )
    outline.append(outline[0])
    return outline


class _Star(Figure):
    tips = 5
    divisor = 3

    def area(self) -> float:
        inner = math.pi * self.radius1 * self.radius1
        outer = math.pi * self.radius2 * self.radius2
        return self.scale * self.scale * (inner + (outer - inner) / self.divisor)

    def perimeter(self) -> float:
        return self.radius1 * self.tips + self.radius2 * self.tips * self.scale

    def primitives(self) -> list[Primitive]:
        outline = star_points(self.tips, self.radius1, self.radius2)
        return [
            Primitive("line", (*start, *end))
            for start, end in zip(outline, outline[1:])
        ]


class Star5(_Star):
    tips = 5
    divisor = 3


class Star6(_Star):
    tips = 6
    divisor = 5


class Star8(_Star):
    tips = 8
    divisor = 4


@dataclass(eq=False)
class CustomShape(Figure):
    """A hand-drawn shape made of filled dots."""

    points: list[tuple[float, float]] = field(default_factory=list)

    def add_point(self, x: float, y: float) -> None:
        """Record a scene position as a dot relative to the item's position."""
        self.points.append((x - self.x, y - self.y))

    def primitives(self) -> list[Primitive]:
        d = self.dot_size
        return [
            Primitive("ellipse", (px - d, py - d, 2 * d, 2 * d), filled=True)
            for px, py in self.points
        ]