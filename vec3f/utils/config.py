"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только явным вызовом save()).
"""

import json
import os
from pathlib import Path
from typing import Optional

from vec3f.utils.logger import logger

CONFIG_ENV = "VEC3F_CONFIG"
DEFAULT_PATH = "vec3f.json"

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "repr_precision": 3,
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: Optional[str] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(CONFIG_ENV, DEFAULT_PATH))
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data.update(loaded)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.debug("[Config] No config file – using defaults.")
        self._apply()

    def _apply(self):
        try:
            logger.setLevel(self["log_level"])
        except (TypeError, ValueError) as exc:
            logger.error(f"[Config] Bad log_level {self['log_level']!r}: {exc}")
            self.data["log_level"] = DEFAULT_CONFIG["log_level"]
            logger.setLevel(self.data["log_level"])

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self._apply()
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
