"""Two-dimensional vector used for positions, velocities and sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class Vector2:
    """A mutable 2D vector.

    ``a * b`` between two vectors is the dot product, and ``a * k`` with a
    number scales. In-place ``a *= b`` with a vector multiplies the
    components pairwise.
    """

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return self.x * other.x + self.y * other.y
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __truediv__(self, value: float) -> Vector2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Vector2(self.x / value, self.y / value)

    def __itruediv__(self, value: float) -> Vector2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        self.x /= value
        self.y /= value
        return self

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Return a unit vector in the same direction, or zero for a zero vector."""
        length = self.length()
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)