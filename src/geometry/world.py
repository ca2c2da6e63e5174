# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Optional, List
from core.ray import Ray

class HittableList(Hittable):
    """
    An ordered list of Hittable objects answering nearest-hit queries by
    linear scan. Objects are only added while building the scene.
    """
    def __init__(self):
        self.objects: List[Hittable] = []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            # Strictly closer only: on a tie the earlier object keeps the hit.
            if rec is not None and (hit_record is None or rec.t < closest_so_far):
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
