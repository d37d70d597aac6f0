# geometry/hittable.py
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray
from core.interval import Interval

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outside

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, "
                f"t={self.t}, front_face={self.front_face})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    hit() returns the nearest intersection strictly inside ray_t, or None.
    Implementations must not modify the ray, the interval or themselves.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
