"""
config_manager.py
-----------------
Configuration loader for the game's tunable values.

Features:
- Supports .json and .yaml/.yml config files
- Resolves bare filenames against the package config directory
- Recursively merges loaded values over in-code defaults
- Ignores '_notes' keys for human-readable configs
"""

import json
import os

import yaml

from gravship.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

CONFIG_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    ".",
    CONFIG_ROOT,
]

_EXTENSIONS = (".yaml", ".yml", ".json")


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.json, .yaml or .yml)
        default_dict: Default fallback config
        strict: If True, raise exception on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = resolve_path(filename)

    try:
        if path.endswith(".json"):
            data = _load_json(path)
        else:
            data = _load_yaml(path)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    if not isinstance(data, dict):
        DebugLogger.warn(f"{os.path.basename(path)} is not a mapping - using defaults", category="loading")
        return _merge_dicts(default_dict, {})

    return _merge_dicts(default_dict, data)


def resolve_path(filename):
    """Return the first existing match for filename in SEARCH_DIRS, or filename unchanged."""
    if os.path.isabs(filename):
        return filename

    filename = filename.replace("\\", "/").lstrip("/")
    has_ext = filename.endswith(_EXTENSIONS)

    for directory in SEARCH_DIRS:
        candidates = [filename] if has_ext else [filename + ext for ext in _EXTENSIONS]
        for candidate in candidates:
            path = os.path.join(directory, candidate)
            if os.path.isfile(path):
                return path

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
