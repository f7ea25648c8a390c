#!/usr/bin/env python3
"""
Configuration for the benchmark set procedures.

Values can be overridden via environment variables or a YAML settings file:

    procedure_file: benchmarks/procedures.json
    verbose: false
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

# =============================================================================
# Configuration (can be overridden via environment variables)
# =============================================================================

DEFAULT_PROCEDURE_FILE = Path(os.environ.get("BENCHSET_PROCEDURE_FILE", "procedures.json"))


@dataclass
class Settings:
    """Settings shared by the command line commands."""
    procedure_file: Path = field(default_factory=lambda: DEFAULT_PROCEDURE_FILE)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, yaml_data: Optional[Dict[str, Any]]) -> "Settings":
        """
        Create Settings from parsed YAML data.

        Args:
            yaml_data: Dictionary containing the parsed YAML content (may be None for an empty file)

        Returns:
            Settings with defaults for anything not given

        Raises:
            ValueError: If the YAML content is not a mapping
        """
        if yaml_data is None:
            yaml_data = {}
        if not isinstance(yaml_data, dict):
            raise ValueError("Settings file must contain a mapping")

        settings = cls()
        if yaml_data.get("procedure_file"):
            settings.procedure_file = Path(yaml_data["procedure_file"])
        settings.verbose = bool(yaml_data.get("verbose", False))
        return settings


def load_settings(path: Union[str, Path]) -> Settings:
    """
    Parse a YAML settings file.

    Args:
        path: Path to the settings file

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If the settings file does not exist
        yaml.YAMLError: If the file contains invalid YAML
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r") as file:
        return Settings.from_yaml(yaml.safe_load(file))
