"""
2D vector value type for point-mass flight dynamics.

Convention: x is horizontal distance (positive forward), y is altitude
(positive up). Angles are radians, counter-clockwise positive.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2D:
    """
    Immutable 2D vector. Every operation returns a new instance.

    Attributes
    ----------
    x : float
        Horizontal component
    y : float
        Vertical component
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Vector2D':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector2D':
        """
        Divide by a scalar.

        Raises
        ------
        ZeroDivisionError
            If scalar is zero, including numpy zeros and numpy components,
            which would otherwise produce inf/nan.
        """
        scalar = float(scalar)
        if scalar == 0.0:
            raise ZeroDivisionError("Vector2D division by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(-self.x, -self.y)

    def dot(self, other: 'Vector2D') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Euclidean length sqrt(x² + y²)."""
        return float(np.sqrt(self.x * self.x + self.y * self.y))

    def magnitude_squared(self) -> float:
        """Squared length, avoids the square root for comparisons."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> 'Vector2D':
        """
        Unit vector in the same direction.

        Returns the zero vector when the magnitude is below 1e-9.
        """
        mag = self.magnitude()
        if mag < 1e-9:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / mag, self.y / mag)

    def rotated(self, angle: float) -> 'Vector2D':
        """
        Rotate counter-clockwise by angle.

        Parameters
        ----------
        angle : float
            Rotation angle (radians)
        """
        cos_a = float(np.cos(angle))
        sin_a = float(np.sin(angle))
        return Vector2D(self.x * cos_a - self.y * sin_a,
                        self.x * sin_a + self.y * cos_a)

    def angle(self) -> float:
        """Direction angle atan2(y, x), in (-pi, pi]."""
        return float(np.arctan2(self.y, self.x))

    def to_array(self) -> np.ndarray:
        """Return components as a numpy array [x, y]."""
        return np.array([self.x, self.y])

    def __repr__(self):
        return f"Vector2D({self.x:.3f}, {self.y:.3f})"
