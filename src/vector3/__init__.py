from vector3.vector import DEFAULT_DTYPE, DegenerateVectorError, Vector3
from vector3.utils import distance, lerp, random_in_unit_sphere, random_unit_vector, reflect

__all__ = [
    "DEFAULT_DTYPE",
    "DegenerateVectorError",
    "Vector3",
    "distance",
    "lerp",
    "random_in_unit_sphere",
    "random_unit_vector",
    "reflect",
]
