# -*- coding: utf-8 -*-
"""
Трёхмерный вектор одинарной точности (float32) на базе NumPy.

Компоненты лежат в 16‑байтовом выровненном буфере из 4 лейнов float32
(x, y, z и заполнитель), вся арифметика выполняется во float32.
NaN и бесконечности не отсекаются: они распространяются по правилам
IEEE‑754, деление на ноль ничего не выбрасывает.
"""

import numbers
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from vec3f.math.ordering import Ordering
from vec3f.math.storage import aligned_lanes
from vec3f.utils.config import Config
from vec3f.utils.logger import logger

# предупреждения NumPy о делении на ноль / NaN / переполнении глушим
_IEEE = {"divide": "ignore", "invalid": "ignore", "over": "ignore", "under": "ignore"}


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real)


class Vec3:
    """Вектор‑3 (float32) с выравниванием 16 байт."""

    __slots__ = ("_v",)

    # Операции NumPy‑скаляров с Vec3 передаются нашим __r*__ методам.
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = aligned_lanes()
        with np.errstate(**_IEEE):
            self._v[:3] = (x, y, z)

    @classmethod
    def _wrap(cls, xyz: np.ndarray) -> "Vec3":
        obj = cls.__new__(cls)
        obj._v = aligned_lanes()
        obj._v[:3] = xyz
        return obj

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def zero(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vec3":
        return cls(x, y, z)

    @classmethod
    def splat(cls, v: float) -> "Vec3":
        return cls(v, v, v)

    # -----------------------------------------------------------------
    # доступ к компонентам
    # -----------------------------------------------------------------
    def get_x(self) -> float:
        return float(self._v[0])

    def get_y(self) -> float:
        return float(self._v[1])

    def get_z(self) -> float:
        return float(self._v[2])

    x = property(get_x)
    y = property(get_y)
    z = property(get_z)

    @property
    def nbytes(self) -> int:
        """Размер хранилища в байтах (16, из них значимы 12)."""
        return self._v.nbytes

    # -----------------------------------------------------------------
    # геометрия
    # -----------------------------------------------------------------
    def _dot32(self, other: "Vec3") -> np.float32:
        a, b = self._v, other._v
        with np.errstate(**_IEEE):
            return (a[0] * b[0]) + (a[1] * b[1]) + (a[2] * b[2])

    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(self._dot32(other))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка)."""
        a, b = self._v, other._v
        with np.errstate(**_IEEE):
            return self._wrap((
                a[1] * b[2] - b[1] * a[2],
                a[2] * b[0] - b[2] * a[0],
                a[0] * b[1] - b[0] * a[1],
            ))

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.sqrt(self._dot32(self)))

    def length_squared(self) -> float:
        return float(self._dot32(self))

    def normalize(self) -> "Vec3":
        """
        Единичный вектор того же направления.

        Нулевой вектор не обрабатывается особо: 1/0 даёт inf,
        0*inf даёт NaN, и это ожидаемый результат.
        """
        sq = self._dot32(self)
        if sq == 0.0:
            logger.debug("[Vec3] normalize() of zero-length vector, result is non-finite")
        with np.errstate(**_IEEE):
            inv_length = np.float32(1.0) / np.sqrt(sq)
        return self * inv_length

    def min(self, other: "Vec3") -> "Vec3":
        """Покомпонентный минимум (NaN выбирается, только если NaN с обеих сторон)."""
        return self._wrap(np.fmin(self._v[:3], other._v[:3]))

    def max(self, other: "Vec3") -> "Vec3":
        """Покомпонентный максимум (правило для NaN то же, что и в min)."""
        return self._wrap(np.fmax(self._v[:3], other._v[:3]))

    def hmin(self) -> float:
        """Наименьшая из трёх компонент."""
        v = self._v
        return float(np.fmin(v[0], np.fmin(v[1], v[2])))

    def hmax(self) -> float:
        """Наибольшая из трёх компонент."""
        v = self._v
        return float(np.fmax(v[0], np.fmax(v[1], v[2])))

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(**_IEEE):
            return self._wrap(self._v[:3] + other._v[:3])

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(**_IEEE):
            return self._wrap(self._v[:3] - other._v[:3])

    def __mul__(self, other) -> "Vec3":
        """Vec3 * Vec3 – произведение Адамара, Vec3 * float – масштаб."""
        rhs = _rhs_lanes(other)
        if rhs is None:
            return NotImplemented
        with np.errstate(**_IEEE):
            return self._wrap(self._v[:3] * rhs)

    def __rmul__(self, scalar: float) -> "Vec3":
        if not _is_scalar(scalar):
            return NotImplemented
        with np.errstate(**_IEEE):
            return self._wrap(np.float32(scalar) * self._v[:3])

    def __truediv__(self, scalar: float) -> "Vec3":
        if not _is_scalar(scalar):
            return NotImplemented
        with np.errstate(**_IEEE):
            return self._wrap(self._v[:3] / np.float32(scalar))

    def __neg__(self) -> "Vec3":
        return self._wrap(-self._v[:3])

    # -----------------------------------------------------------------
    # арифметика на месте (перезаписывает компоненты получателя)
    # -----------------------------------------------------------------
    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        xyz = self._v[:3]
        with np.errstate(**_IEEE):
            np.add(xyz, other._v[:3], out=xyz)
        return self

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        xyz = self._v[:3]
        with np.errstate(**_IEEE):
            np.subtract(xyz, other._v[:3], out=xyz)
        return self

    def __imul__(self, other) -> "Vec3":
        rhs = _rhs_lanes(other)
        if rhs is None:
            return NotImplemented
        xyz = self._v[:3]
        with np.errstate(**_IEEE):
            np.multiply(xyz, rhs, out=xyz)
        return self

    def __itruediv__(self, scalar: float) -> "Vec3":
        if not _is_scalar(scalar):
            return NotImplemented
        xyz = self._v[:3]
        with np.errstate(**_IEEE):
            np.divide(xyz, np.float32(scalar), out=xyz)
        return self

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.all(self._v[:3] == other._v[:3]))

    def __ne__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.any(self._v[:3] != other._v[:3]))

    __hash__ = None

    def partial_cmp(self, other: "Vec3") -> Optional[Ordering]:
        """
        Частичный порядок: LESS/GREATER/EQUAL, только если так соотносятся
        все три компоненты; в остальных случаях (и при любом NaN) – None.
        """
        a, b = self._v[:3], other._v[:3]
        with np.errstate(invalid="ignore"):
            if np.all(a < b):
                return Ordering.LESS
            if np.all(a > b):
                return Ordering.GREATER
            if np.all(a == b):
                return Ordering.EQUAL
        return None

    def __lt__(self, other: "Vec3") -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.LESS

    def __gt__(self, other: "Vec3") -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.GREATER

    def __le__(self, other: "Vec3") -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.LESS, Ordering.EQUAL)

    def __ge__(self, other: "Vec3") -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.GREATER, Ordering.EQUAL)

    # -----------------------------------------------------------------
    # преобразования в кортеж / массив и обратно
    # -----------------------------------------------------------------
    @classmethod
    def from_tuple(cls, t: Tuple[float, float, float]) -> "Vec3":
        if len(t) != 3:
            logger.error(f"[Vec3] Expected 3 components, got {len(t)}")
            raise ValueError(f"Vec3 needs exactly 3 components, got {len(t)}")
        return cls(t[0], t[1], t[2])

    @classmethod
    def from_array(cls, arr: Iterable[float]) -> "Vec3":
        """Из list / ndarray / любой последовательности из трёх чисел."""
        a = np.asarray(arr)
        if a.shape != (3,):
            logger.error(f"[Vec3] Expected array of shape (3,), got {a.shape}")
            raise ValueError(f"Vec3 needs an array of shape (3,), got {a.shape}")
        with np.errstate(**_IEEE):
            return cls._wrap(a)

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v[:3].tolist())

    def to_array(self) -> np.ndarray:
        """Копия 3‑элементного массива float32."""
        return self._v[:3].copy()

    as_np = to_array

    def __iter__(self) -> Iterator[float]:
        return iter(self._v[:3].tolist())

    # -----------------------------------------------------------------
    # копирование / pickle (буфер должен остаться выровненным)
    # -----------------------------------------------------------------
    def copy(self) -> "Vec3":
        return self._wrap(self._v[:3])

    def __copy__(self) -> "Vec3":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vec3":
        return self.copy()

    def __reduce__(self):
        return (type(self), self.to_tuple())

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        x, y, z = (str(c) for c in self._v[:3])
        return f"[{x}, {y}, {z}]"

    def __repr__(self) -> str:
        p = Config()["repr_precision"]
        return f"Vec3({self.x:.{p}f}, {self.y:.{p}f}, {self.z:.{p}f})"


def _rhs_lanes(other):
    """Правый операнд умножения: лейны Vec3, float32‑скаляр или None."""
    if isinstance(other, Vec3):
        return other._v[:3]
    if _is_scalar(other):
        # скаляр вне диапазона float32 становится inf без предупреждения
        with np.errstate(**_IEEE):
            return np.float32(other)
    return None


def vec3(x: float, y: float, z: float) -> Vec3:
    """Короткая форма Vec3.new(x, y, z)."""
    return Vec3(x, y, z)
