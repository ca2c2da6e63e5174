import math
from core.vector import Vector3

def random_vector(rng) -> Vector3:
    """
    Returns a vector whose components are independently uniform in [0, 1).
    """
    return Vector3(rng.random(), rng.random(), rng.random())

def point_in_unit_ball(u: float, v: float, o: float) -> Vector3:
    """
    Maps three uniform [0, 1) draws to a point in the unit ball using a
    cube-root radius and polar angles.
    """
    r = o ** (1.0 / 3.0)
    z = r * (1.0 - 2.0 * u)
    s = math.sqrt(1.0 - z * z)
    phi = 2.0 * math.pi * v
    return Vector3(r * s * math.cos(phi), r * s * math.sin(phi), z)

def random_in_unit_ball(rng) -> Vector3:
    """
    Returns a random point inside the unit ball. The draws happen in the
    order u, v, o.
    """
    u = rng.random()
    v = rng.random()
    o = rng.random()
    return point_in_unit_ball(u, v, o)

def random_unit_vector(rng) -> Vector3:
    return random_in_unit_ball(rng).unit_vector()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the unit normal n.
    """
    return v - n * 2 * v.dot(n)
