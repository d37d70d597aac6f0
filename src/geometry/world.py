# geometry/world.py
from typing import Iterable, List, Optional
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    An ordered collection of Hittable objects that is itself Hittable.
    The list owns its members; the result of hit() does not depend on
    insertion order.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        # Each member only sees hits closer than the best one so far
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
