# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    A negative radius is clamped to zero.
    """
    def __init__(self, center: Point3, radius: float):
        self.center = center
        self.radius = max(0.0, float(radius))

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # A point sphere has no surface to hit
        if self.radius == 0:
            return None

        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
