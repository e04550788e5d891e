# vec3f/math/storage.py
# ---------------------------------------------------------------
# Выровненное хранилище для Vec3:
# - 4 лейна float32 (16 байт), лейн 3 – заполнитель (всегда 0.0),
# - адрес данных кратен 16 (удобно для загрузки в SIMD‑регистр).
# ---------------------------------------------------------------

import numpy as np

LANES = 4
ALIGNMENT = 16
DTYPE = np.float32


def aligned_lanes(lanes: int = LANES, alignment: int = ALIGNMENT) -> np.ndarray:
    """
    Нулевой массив float32 длиной `lanes`, чей адрес кратен `alignment`.

    NumPy не даёт задать выравнивание напрямую, поэтому выделяем
    буфер с запасом и берём срез с нужного смещения.
    """
    itemsize = np.dtype(DTYPE).itemsize
    raw = np.zeros(lanes + alignment // itemsize, dtype=DTYPE)
    offset = (-raw.ctypes.data % alignment) // itemsize
    return raw[offset:offset + lanes]


def is_aligned(array: np.ndarray, alignment: int = ALIGNMENT) -> bool:
    return array.ctypes.data % alignment == 0
