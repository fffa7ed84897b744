"""Configuration loading for autoshow.

The configuration is a JSON document with four sections (helper,
window_search, events, display). Sections or keys missing from the file
fall back to DEFAULT_CONFIG.
"""
import copy
import json
from pathlib import Path
from typing import Any, Dict

CONFIG_FILENAME = "autoshow_config.json"

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "helper": {
        "command": "cellwriter",
        "show_args": ["--show-window"],
        "hide_args": ["--hide-window"],
        "window_class": "cellwriter",
    },
    "window_search": {
        "max_depth": 1,
    },
    "events": {
        "focus": "focus:",
        "activate": "window:activate",
    },
    "display": {
        "name": None,
    },
}


def load_config(config_path: Path) -> Dict[str, Dict[str, Any]]:
    """Load configuration from a JSON file, filling gaps from DEFAULT_CONFIG.

    Args:
        config_path: Path to autoshow_config.json

    Returns:
        Configuration dictionary with every section of DEFAULT_CONFIG

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the document or one of its sections is not an object
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        loaded = json.load(f)

    return merge_config(loaded)


def merge_config(loaded: Any) -> Dict[str, Dict[str, Any]]:
    """Overlay a loaded configuration onto a copy of DEFAULT_CONFIG, section by section."""
    if not isinstance(loaded, dict):
        raise ValueError("Configuration must be a JSON object")

    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in loaded.items():
        if not isinstance(values, dict):
            raise ValueError(f"Configuration section '{section}' must be an object")
        config.setdefault(section, {}).update(values)
    return config
