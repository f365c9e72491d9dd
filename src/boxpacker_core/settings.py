from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "space_between": 0,
    "resize_step": 1,
}


def settings_path() -> str:
    env_path = os.getenv("BOXPACKER_SETTINGS")
    if env_path:
        return os.path.abspath(os.path.expanduser(env_path))
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), "settings.yaml")


@lru_cache(maxsize=None)
def load_settings() -> Dict[str, int]:
    """Load packer defaults from ``settings.yaml`` when available."""

    path = settings_path()
    data = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                data = loaded
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read settings from %s", path)

    settings = DEFAULT_SETTINGS.copy()
    for key in DEFAULT_SETTINGS:
        if key in data:
            try:
                settings[key] = int(data[key])
            except (TypeError, ValueError):
                continue
    return settings


def default_space_between() -> int:
    return load_settings()["space_between"]


def default_resize_step() -> int:
    return load_settings()["resize_step"]
