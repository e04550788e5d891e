# vec3f/math/ordering.py
"""
Результат частичного сравнения векторов.

`None` вместо члена перечисления означает «несравнимы».
"""

from enum import IntEnum


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1
