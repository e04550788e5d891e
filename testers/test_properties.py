# -*- coding: utf-8 -*-
"""
Алгебраические свойства Vec3 на наборе случайных векторов.
"""

import itertools

import numpy as np

from vec3f.math import Vec3


def _pairs(vectors):
    return zip(vectors, vectors[1:] + vectors[:1])


def test_dot_commutes(vectors):
    for a, b in _pairs(vectors):
        assert a.dot(b) == b.dot(a)


def test_cross_anticommutes(vectors):
    for a, b in _pairs(vectors):
        assert a.cross(b) == -b.cross(a)


def test_cross_is_orthogonal(vectors):
    for a, b in _pairs(vectors):
        c = a.cross(b)
        scale = a.length() * b.length() * max(a.length(), b.length())
        assert abs(c.dot(a)) <= 1e-5 * scale
        assert abs(c.dot(b)) <= 1e-5 * scale


def test_normalize_has_unit_length(vectors):
    for v in vectors:
        assert np.isclose(v.normalize().length(), 1.0, atol=1e-6)


def test_length_squared_is_dot(vectors):
    for v in vectors:
        assert v.length_squared() == v.dot(v)


def test_scalar_mul_commutes(vectors, scalars):
    for v, s in zip(vectors, scalars):
        assert v * s == s * v


def test_inplace_matches_pure(vectors, scalars):
    for (a, b), s in zip(_pairs(vectors), scalars):
        c = a.copy()
        c += b
        assert c == a + b
        c = a.copy()
        c -= b
        assert c == a - b
        c = a.copy()
        c *= b
        assert c == a * b
        c = a.copy()
        c *= s
        assert c == a * s
        c = a.copy()
        c /= s
        assert c == a / s


def test_hmin_hmax_bound_components(vectors):
    for v in vectors:
        assert v.hmin() == min(v.to_tuple())
        assert v.hmax() == max(v.to_tuple())


def test_tuple_roundtrip_is_bit_exact():
    values = np.array(
        [0.1, -0.0, 1e-45, 3.4028235e38, -7.25, float("inf"), float("-inf"), 1 / 3],
        dtype=np.float32,
    )
    for x, y, z in itertools.permutations(values.tolist(), 3):
        t = Vec3.from_tuple((x, y, z)).to_tuple()
        bits_in = np.array((x, y, z), dtype=np.float32).view(np.uint32)
        bits_out = np.array(t, dtype=np.float32).view(np.uint32)
        assert bits_in.tolist() == bits_out.tolist()


def test_array_roundtrip_is_bit_exact(vectors):
    for v in vectors:
        arr = v.to_array()
        back = Vec3.from_array(arr).to_array()
        assert arr.view(np.uint32).tolist() == back.view(np.uint32).tolist()
