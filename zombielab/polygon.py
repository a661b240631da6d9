"""A polygon held as points in normalized device coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_POSITIONS = 256
COS_5_DEGREES = 0.9961947
SIN_5_DEGREES = 0.08715574

Point = tuple[float, float]


class PolygonFullError(ValueError):
    """Raised when a polygon already holds the maximum number of points."""


@dataclass
class Polygon:
    """Points in the [-1, 1] square plus a cached center of gravity."""

    points: list[Point] = field(default_factory=list)
    center_x: float = 0.0
    center_y: float = 0.0

    def __len__(self) -> int:
        return len(self.points)

    @property
    def center(self) -> Point:
        return (self.center_x, self.center_y)

    def _append(self, point: Point) -> None:
        if len(self.points) >= MAX_POSITIONS:
            raise PolygonFullError(f"a polygon holds at most {MAX_POSITIONS} points")
        self.points.append(point)

    def add_point(self, x: float, y: float, width: int, height: int) -> Point:
        """Add a point given in window pixels (origin top-left) and return it."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        point = (2.0 * x / width - 1.0, 2.0 * (height - y) / height - 1.0)
        self._append(point)
        return point

    def close(self) -> None:
        """Repeat the first point at the end so the outline is closed."""
        if not self.points:
            raise ValueError("cannot close an empty polygon")
        self._append(self.points[0])

    def clear(self) -> None:
        self.points.clear()

    def update_center(self) -> Point:
        """Recompute the center of gravity as the mean of all points."""
        if not self.points:
            self.center_x = self.center_y = 0.0
            return self.center
        xs, ys = zip(*self.points)
        count = len(self.points)
        self.center_x = sum(xs) / count
        self.center_y = sum(ys) / count
        return self.center

    def move(self, dx: float, dy: float) -> None:
        self.points = [(x + dx, y + dy) for x, y in self.points]

    def rotate(self) -> None:
        """Rotate every point 5 degrees counter-clockwise about the center."""
        cx, cy = self.center_x, self.center_y
        self.points = [
            (
                COS_5_DEGREES * (x - cx) - SIN_5_DEGREES * (y - cy) + cx,
                SIN_5_DEGREES * (x - cx) + COS_5_DEGREES * (y - cy) + cy,
            )
            for x, y in self.points
        ]