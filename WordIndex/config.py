"""
Configuration loading for WordIndex.
Settings live in config.json next to this module; built-in defaults are used
when the file is missing or cannot be parsed.
"""

import copy
import json
import os

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "preprocessing": {
        "lowercase": True,
        "strip_trailing_punctuation": True,
        "punctuation": ".,?;"
    },
    "pipeline_order": [
        "tokenize", "lowercase", "strip_trailing_punctuation"
    ],
    "index": {
        "dump_file": "invertedIndex.txt",
        "tf_precision": 6
    },
    "search": {
        "top_k": 10,
        "skip_zero_scores": False
    }
}


def default_config():
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path=None):
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the JSON file (defaults to WordIndex/config.json)

    Returns:
        Configuration dictionary
    """
    config_path = config_path or CONFIG_PATH

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            print(f"Warning: Could not load config file: {e}. Using default settings.")

    return default_config()
