from typing import NamedTuple
from core.ray import Ray
from core.vector import Color

class Scatter(NamedTuple):
    """Outcome of a scattering event: color attenuation and the outgoing ray."""
    attenuation: Color
    scattered: Ray
