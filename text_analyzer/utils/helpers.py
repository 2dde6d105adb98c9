"""
helpers.py

Small file-loading utilities shared across the package.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def load_yaml(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file into a dictionary.

    Args:
        file_path (Union[str, Path]): Path to the YAML file.

    Returns:
        Dict[str, Any]: The parsed content, or an empty dict for an empty file.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
    """
    with Path(file_path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
