# vec3f/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – объект logging.Logger пакета (level WARNING)
    * Config – JSON‑конфигурация
"""

from .logger import logger
from .config import Config

__all__ = ["logger", "Config"]
