# materials/lambertian.py
from dataclasses import dataclass
from typing import TYPE_CHECKING
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from materials.scatter_record import Scatter

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

@dataclass(frozen=True)
class Lambertian:
    """
    Lambertian diffuse material.
    """
    albedo: Color

def scatter_lambertian(material: Lambertian, ray_in: Ray, rec: "HitRecord", rng) -> Scatter:
    # Pick a random scatter direction by adding a random unit vector to the normal.
    scatter_direction = rec.normal + random_unit_vector(rng)

    # The two can cancel out; fall back to the normal.
    if scatter_direction.near_zero():
        scatter_direction = rec.normal

    return Scatter(material.albedo, Ray(rec.p, scatter_direction))
