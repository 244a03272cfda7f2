#!/usr/bin/env python3
"""
Preset JSON loading utilities.

A preset is a named SimulationConfig stored as JSON in ballsim/presets/*.json.

Schema
======
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "config": {                       # any SimulationConfig field; missing keys keep defaults
    "window_width": 1000,
    "trail_enabled": true,
    "trail_color": [0, 255, 255, 100],
    "acceleration_decay": null,     # null turns the decay off
    "initial_velocity": [10.0, 5.0]
  }
}

Users can add their own JSON files into the folder and they'll be picked up by the loader.
"""
import json
import logging
import os
from typing import List, Optional, Tuple

from .config import SimulationConfig

logger = logging.getLogger(__name__)

PRESETS_DIR = os.path.join(os.path.dirname(__file__), "presets")
DEFAULT_PRESET = "impulse.json"


class PresetError(ValueError):
    """A preset file is missing, unreadable or holds an invalid config."""


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read preset %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Preset %s is not a JSON object", path)
        return None
    return data


def list_presets(presets_dir: str = PRESETS_DIR) -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for available presets."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(presets_dir):
        return items
    for fn in sorted(os.listdir(presets_dir)):
        if not fn.lower().endswith(".json"):
            continue
        data = _read_json(os.path.join(presets_dir, fn)) or {}
        display = data.get("name") or os.path.splitext(fn)[0]
        items.append((fn, display))
    return items


def load_preset(file_name: str, presets_dir: str = PRESETS_DIR) -> Tuple[SimulationConfig, str]:
    """
    Load a preset by file name ("impulse" and "impulse.json" both work).
    Returns (config, display_name).
    """
    if not file_name.lower().endswith(".json"):
        file_name += ".json"
    path = os.path.join(presets_dir, file_name)
    if not os.path.isfile(path):
        raise PresetError(f"no such preset: {file_name}")
    data = _read_json(path)
    if data is None:
        raise PresetError(f"unreadable preset: {file_name}")
    display_name = data.get("name") or os.path.splitext(file_name)[0]
    try:
        config = SimulationConfig.from_dict(data.get("config", {}))
    except (AttributeError, TypeError, ValueError, IndexError) as exc:
        raise PresetError(f"invalid preset {file_name}: {exc}") from exc
    logger.debug("Loaded preset %s (%s)", file_name, display_name)
    return config, display_name
