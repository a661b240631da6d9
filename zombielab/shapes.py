"""Model-space shapes of the arcade game and 2D affine transforms for them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce

TO_RADIAN = 0.01745329252
TO_DEGREE = 57.295779513

Point = tuple[float, float]
Color = tuple[float, float, float]
Matrix = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


class DrawMode(Enum):
    FAN = "fan"
    POINTS = "points"


@dataclass(frozen=True)
class Part:
    """One coloured primitive of a shape: a filled triangle fan or a set of points."""

    name: str
    vertices: tuple[Point, ...]
    color: Color
    mode: DrawMode = DrawMode.FAN
    point_size: float = 1.0

    def __post_init__(self) -> None:
        if not self.vertices:
            raise ValueError(f"part {self.name!r} has no vertices")
        if any(not 0.0 <= c <= 1.0 for c in self.color):
            raise ValueError(f"part {self.name!r} has a colour outside [0, 1]")


@dataclass(frozen=True)
class Shape:
    """An ordered list of parts drawn one after another."""

    name: str
    parts: tuple[Part, ...]

    def __getitem__(self, name: str) -> Part:
        for part in self.parts:
            if part.name == name:
                return part
        raise KeyError(name)

    def __iter__(self):
        return iter(self.parts)

    def vertex_count(self) -> int:
        return sum(len(part.vertices) for part in self.parts)

    def transformed(self, matrix: Matrix) -> Shape:
        """Return a copy with every vertex mapped through ``matrix``."""
        return replace(
            self,
            parts=tuple(
                replace(part, vertices=tuple(apply(matrix, v) for v in part.vertices))
                for part in self.parts
            ),
        )


def identity() -> Matrix:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def translate(tx: float, ty: float) -> Matrix:
    return ((1.0, 0.0, float(tx)), (0.0, 1.0, float(ty)), (0.0, 0.0, 1.0))


def rotate(degrees: float) -> Matrix:
    """Counter-clockwise rotation about the origin."""
    rad = degrees * TO_RADIAN
    c, s = math.cos(rad), math.sin(rad)
    return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


def scale(sx: float, sy: float) -> Matrix:
    return ((float(sx), 0.0, 0.0), (0.0, float(sy), 0.0), (0.0, 0.0, 1.0))


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )  # type: ignore[return-value]


def compose(*args: Matrix) -> Matrix:
    """Multiply matrices left to right; the rightmost one acts on points first."""
    return reduce(_multiply, args, identity())


def apply(matrix: Matrix, point: Point) -> Point:
    x, y = point
    (a, b, c), (d, e, f), _ = matrix
    return (a * x + b * y + c, d * x + e * y + f)


def _rgb(r: int, g: int, b: int) -> Color:
    return (r / 255.0, g / 255.0, b / 255.0)


AIRPLANE = Shape(
    "airplane",
    (
        Part("big_wing", ((0.0, 0.0), (-20.0, 15.0), (-20.0, 20.0), (0.0, 23.0), (20.0, 20.0), (20.0, 15.0)),
             _rgb(150, 129, 183)),
        Part("small_wing", ((0.0, -18.0), (-11.0, -12.0), (-12.0, -7.0), (0.0, -10.0), (12.0, -7.0), (11.0, -12.0)),
             _rgb(245, 211, 0)),
        Part("body", ((0.0, -25.0), (-6.0, 0.0), (-6.0, 22.0), (6.0, 22.0), (6.0, 0.0)), _rgb(111, 85, 157)),
        Part("back", ((0.0, 25.0), (-7.0, 24.0), (-7.0, 21.0), (7.0, 21.0), (7.0, 24.0)), _rgb(150, 129, 183)),
        Part("sidewinder1", ((-20.0, 10.0), (-18.0, 3.0), (-16.0, 10.0), (-18.0, 20.0), (-20.0, 20.0)),
             _rgb(245, 211, 0)),
        Part("sidewinder2", ((20.0, 10.0), (18.0, 3.0), (16.0, 10.0), (18.0, 20.0), (20.0, 20.0)),
             _rgb(245, 211, 0)),
        Part("center", ((0.0, 0.0),), _rgb(255, 0, 0), DrawMode.POINTS, 5.0),
    ),
)

CAR2 = Shape(
    "car2",
    (
        Part("body", ((-18.0, -7.0), (-18.0, 0.0), (-13.0, 0.0), (-10.0, 8.0), (10.0, 8.0), (13.0, 0.0),
                      (18.0, 0.0), (18.0, -7.0)), _rgb(100, 141, 159)),
        Part("front_window", ((-10.0, 0.0), (-8.0, 6.0), (-2.0, 6.0), (-2.0, 0.0)), _rgb(235, 219, 208)),
        Part("back_window", ((0.0, 0.0), (0.0, 6.0), (8.0, 6.0), (10.0, 0.0)), _rgb(235, 219, 208)),
        Part("front_wheel", ((-11.0, -11.0), (-13.0, -8.0), (-13.0, -7.0), (-11.0, -4.0), (-7.0, -4.0),
                             (-5.0, -7.0), (-5.0, -8.0), (-7.0, -11.0)), _rgb(0, 0, 0)),
        Part("back_wheel", ((7.0, -11.0), (5.0, -8.0), (5.0, -7.0), (7.0, -4.0), (11.0, -4.0), (13.0, -7.0),
                            (13.0, -8.0), (11.0, -11.0)), _rgb(0, 0, 0)),
        Part("light1", ((-18.0, -1.0), (-17.0, -2.0), (-18.0, -3.0)), _rgb(249, 244, 0)),
        Part("light2", ((-18.0, -4.0), (-17.0, -5.0), (-18.0, -6.0)), _rgb(249, 244, 0)),
    ),
)

HAT = Shape(
    "hat",
    (
        Part("leaf", ((3.0, 20.0), (3.0, 28.0), (9.0, 32.0), (9.0, 24.0)), _rgb(167, 255, 55)),
        Part("body", ((-19.5, 2.0), (19.5, 2.0), (15.0, 20.0), (-15.0, 20.0)), _rgb(255, 144, 32)),
        Part("strip", ((-20.0, 0.0), (20.0, 0.0), (19.5, 2.0), (-19.5, 2.0)), _rgb(255, 40, 33)),
        Part("bottom", ((25.0, 0.0), (-25.0, 0.0), (-25.0, -4.0), (25.0, -4.0)), _rgb(255, 144, 32)),
    ),
)

CAKE = Shape(
    "cake",
    (
        Part("fire", ((-0.5, 14.0), (-0.5, 13.0), (0.5, 13.0), (0.5, 14.0)), _rgb(255, 0, 0)),
        Part("candle", ((-1.0, 8.0), (-1.0, 13.0), (1.0, 13.0), (1.0, 8.0)), _rgb(255, 204, 0)),
        Part("body", ((8.0, 5.0), (-8.0, 5.0), (-8.0, 8.0), (8.0, 8.0)), _rgb(255, 102, 255)),
        Part("bottom", ((-10.0, 1.0), (-10.0, 5.0), (10.0, 5.0), (10.0, 1.0)), _rgb(255, 102, 255)),
        Part("decorate", ((-10.0, 0.0), (-10.0, 1.0), (10.0, 1.0), (10.0, 0.0)), _rgb(102, 51, 0)),
    ),
)

SWORD = Shape(
    "sword",
    (
        Part("body", ((-6.0, 0.0), (-6.0, -4.0), (6.0, -4.0), (6.0, 0.0)), _rgb(139, 69, 19)),
        Part("body2", ((-2.0, -4.0), (-2.0, -6.0), (2.0, -6.0), (2.0, -4.0)), _rgb(139, 69, 19)),
        Part("head", ((-2.0, 0.0), (-2.0, 16.0), (2.0, 16.0), (2.0, 0.0)), _rgb(155, 155, 155)),
        Part("head2", ((-2.0, 16.0), (0.0, 19.46), (2.0, 16.0)), _rgb(155, 155, 155)),
        Part("in", ((-0.3, 0.7), (-0.3, 15.3), (0.3, 15.3), (0.3, 0.7)), _rgb(0, 0, 0)),
        Part("down", ((-2.0, -6.0), (2.0, -6.0), (4.0, -8.0), (-4.0, -8.0)), _rgb(139, 69, 19)),
        Part("body_in", ((0.0, -1.0), (1.0, -2.732), (0.0, -4.464), (-1.0, -2.732)), _rgb(255, 0, 0)),
    ),
)

STAR = Shape(
    "star",
    (
        Part("star", ((0.0, 0.0), (0.0, 10.0), (2.5, 2.5), (10.0, 2.0), (4.0, -2.0), (6.0, -10.0),
                      (0.0, -4.0), (-6.0, -10.0), (-4.0, -2.0), (-10.0, 2.0), (-2.5, 2.5)),
             (1.0, 1.0, 0.0)),
    ),
)

BUTTERFLY = Shape(
    "butterfly",
    (
        Part("left_wing", ((0.0, 0.0), (-20.0, 30.0), (-40.0, 10.0), (-20.0, -20.0)), (1.0, 0.0, 0.0)),
        Part("right_wing", ((0.0, 0.0), (20.0, 30.0), (40.0, 10.0), (20.0, -20.0)), (0.0, 1.0, 0.0)),
        Part("body", ((-5.0, -15.0), (0.0, 15.0), (5.0, -15.0)), (0.0, 0.0, 0.0)),
    ),
)