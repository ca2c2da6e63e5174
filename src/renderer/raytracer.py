import logging
import random
import sys
from typing import Optional
import numpy as np
from core.vector import Color
from core.ray import Ray
from geometry.hittable import Hittable
from camera.camera import Camera
from materials.material import scatter

logger = logging.getLogger(__name__)

# Search interval for scene queries; the upper bound stays finite to
# exclude non-finite roots.
T_MIN = 0.0
T_MAX = sys.float_info.max

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def background(ray: Ray) -> Color:
    """
    Vertical sky gradient: white looking straight down, sky blue straight up.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, rng, depth: int) -> Color:
    """
    Returns the color seen along a ray, following at most `depth` bounces.

    Each bounce multiplies in the material's attenuation. A ray that escapes
    the scene picks up the background, an absorbed ray or one that runs out
    of bounces contributes black.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    attenuation = WHITE
    for _ in range(depth):
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return attenuation * background(ray)

        result = scatter(rec.material, ray, rec, rng)
        if result is None:
            return BLACK

        attenuation = attenuation * result.attenuation
        ray = result.scattered

    return BLACK

class Renderer:
    """
    Single-threaded sampling loop. Accumulates the summed color of
    `samples_per_pixel` jittered samples for every pixel.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, seed: Optional[int] = None):
        if width < 2 or height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.rng = random.Random(seed)
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Traces the whole image and returns the (height, width, 3) buffer of
        color sums. Row 0 is the top of the image.
        """
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d",
                    self.width, self.height, self.samples_per_pixel, self.max_depth)
        self.reset_accumulation()
        rng = self.rng
        for y in range(self.height):
            logger.debug("Scanlines remaining: %d", self.height - y)
            for x in range(self.width):
                color = BLACK
                for _ in range(self.samples_per_pixel):
                    u = (x + rng.random()) / (self.width - 1)
                    v = ((self.height - y - 1) + rng.random()) / (self.height - 1)
                    ray = camera.get_ray(u, v)
                    color = color + ray_color(ray, world, rng, self.max_depth)
                self.accumulation_buffer[y, x] = tuple(color)
        logger.info("Render finished")
        return self.accumulation_buffer.copy()
