"""
vec3f – трёхмерный вектор одинарной точности для геометрии, физики и графики.
"""

from vec3f.utils import logger, Config
from vec3f.math import Vec3, vec3, Ordering, ALIGNMENT

__version__ = "1.0.0"

# Конфиг читается один раз при импорте: log_level сразу применяется к логгеру
Config()

__all__ = [
    "Vec3",
    "vec3",
    "Ordering",
    "ALIGNMENT",
    "Config",
    "logger",
]
