# materials/metal.py
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from core.ray import Ray
from core.vector import Color
from core.utils import reflect
from materials.scatter_record import Scatter

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

@dataclass(frozen=True)
class Metal:
    """
    Perfectly smooth reflective material.
    """
    albedo: Color

def scatter_metal(material: Metal, ray_in: Ray, rec: "HitRecord", rng) -> Optional[Scatter]:
    reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
    if reflected.dot(rec.normal) > 0:
        return Scatter(material.albedo, Ray(rec.p, reflected))

    return None  # Absorb the ray if it does not scatter forward
