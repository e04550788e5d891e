# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов vec3f.
"""

import numpy as np
import pytest

from vec3f.math import Vec3
from vec3f.utils.config import Config, CONFIG_ENV
from vec3f.utils.logger import logger


# ----------------------------------------------------------------------
# Чистая конфигурация во временном каталоге
# ----------------------------------------------------------------------
@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """
    Путь к (ещё не существующему) JSON‑файлу конфигурации.
    Singleton сбрасывается до и после теста, уровень логгера восстанавливается.
    """
    level = logger.level
    path = tmp_path / "vec3f.json"
    monkeypatch.setenv(CONFIG_ENV, str(path))
    Config.reset()
    yield path
    Config.reset()
    logger.setLevel(level)


# ----------------------------------------------------------------------
# Детерминированный набор случайных векторов (float32)
# ----------------------------------------------------------------------
@pytest.fixture
def vectors():
    rng = np.random.default_rng(1234)
    data = rng.uniform(-100.0, 100.0, size=(64, 3)).astype(np.float32)
    return [Vec3.from_array(row) for row in data]


@pytest.fixture
def scalars():
    rng = np.random.default_rng(4321)
    return [float(s) for s in rng.uniform(-10.0, 10.0, size=64).astype(np.float32)]
