# core/ray.py
from core.vector import Point3, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not normalized.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + t * self.direction

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
