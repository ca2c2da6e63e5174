# materials/material.py
from typing import TYPE_CHECKING, Optional, Union
from core.ray import Ray
from materials.lambertian import Lambertian, scatter_lambertian
from materials.metal import Metal, scatter_metal
from materials.scatter_record import Scatter

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

# Closed set of surface materials.
Material = Union[Lambertian, Metal]

def scatter(material: Material, ray_in: Ray, rec: "HitRecord", rng) -> Optional[Scatter]:
    """
    Computes the attenuation and scattered ray for a hit.
    Returns a Scatter, or None if the material absorbs the ray.
    The rng is the only state touched.
    """
    if isinstance(material, Lambertian):
        return scatter_lambertian(material, ray_in, rec, rng)
    if isinstance(material, Metal):
        return scatter_metal(material, ray_in, rec, rng)
    raise TypeError(f"unsupported material: {type(material).__name__}")
