"""Utility functions for saving, loading, and converting board data."""

import json
import os
from typing import Any

import numpy as np


def to_serializable(obj: Any) -> Any:
    """
    Recursively convert an object to be JSON-serializable.
    Handles numpy types, tuple keys and tuples.
    """
    if isinstance(obj, dict):
        new_dict = {}
        for k, v in obj.items():
            # Convert tuple keys to strings
            if isinstance(k, tuple):
                k = str(k)
            new_dict[str(k)] = to_serializable(v)
        return new_dict
    elif isinstance(obj, (list, tuple)):
        return [to_serializable(item) for item in obj]
    elif isinstance(obj, (np.integer,)):
        return int(obj)
    elif isinstance(obj, (np.floating,)):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, (np.bool_,)):
        return bool(obj)
    else:
        return obj


def save_json(obj: Any, path: str, indent: int = None):
    """Atomically write `obj` as JSON: temp file first, then replace."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    temp_path = path + ".tmp"
    with open(temp_path, "w", encoding="utf-8") as f:
        json.dump(to_serializable(obj), f, indent=indent, ensure_ascii=False)
    os.replace(temp_path, path)


def load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
