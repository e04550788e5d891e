"""
Математический суб‑пакет: Vec3 и всё, что нужно для его хранения и сравнения.
"""

from vec3f.math.ordering import Ordering
from vec3f.math.storage import ALIGNMENT
from vec3f.math.vec3 import Vec3, vec3

__all__ = ["Vec3", "vec3", "Ordering", "ALIGNMENT"]
