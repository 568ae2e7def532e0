# vector3/utils.py
import random

from vector3.vector import Vector3


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """
    Returns the point a fraction t of the way from a to b.
    t outside [0, 1] extrapolates along the same line.
    """
    return a + Vector3.from_to(a, b).multiply_scalar(t)


def distance(a: Vector3, b: Vector3) -> float:
    return Vector3.from_to(a, b).length()


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n. n is expected to be unit length.
    """
    return v - n * (2 * v.dot(n))


def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        # Reject the origin too, so the result can always be normalized.
        if 0 < p.length_sqr() < 1.0:
            return p


def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()
