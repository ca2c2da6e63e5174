from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera looking down -z. The image plane sits `focal_length`
    in front of the origin and is `viewport_height` tall, with its width set
    by the aspect ratio.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, viewport_height: float = 2.0,
                 focal_length: float = 1.0, origin: Optional[Point3] = None):
        if aspect_ratio <= 0 or viewport_height <= 0 or focal_length <= 0:
            raise ValueError("aspect_ratio, viewport_height and focal_length must be positive")
        self.aspect_ratio = aspect_ratio
        self.origin = origin if origin is not None else Vector3.zero()

        viewport_width = aspect_ratio * viewport_height
        self.horizontal = Vector3(viewport_width, 0.0, 0.0)
        self.vertical = Vector3(0.0, viewport_height, 0.0)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  Vector3(0.0, 0.0, focal_length))

    def get_ray(self, u: float, v: float) -> Ray:
        """Maps normalized image coordinates (u, v) in [0, 1] to a world-space ray."""
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)
