# -*- coding: utf-8 -*-
import logging

import pytest

from vec3f.math import Vec3


def test_zero_normalize_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="vec3f"):
        Vec3.zero().normalize()
    assert "zero-length" in caplog.text


def test_regular_normalize_is_quiet(caplog):
    with caplog.at_level(logging.DEBUG, logger="vec3f"):
        Vec3(1, 2, 3).normalize()
    assert caplog.records == []


def test_bad_conversion_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="vec3f"):
        with pytest.raises(ValueError):
            Vec3.from_array([1, 2])
    assert "shape (3,)" in caplog.text
