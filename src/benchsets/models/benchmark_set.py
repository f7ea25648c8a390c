#!/usr/bin/env python3
"""
Benchmark set module for the benchmark set procedures.

A BenchmarkSet describes one benchmarkable workload: which mods to load,
which maps to run, how many ticks per run and how many runs.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Set

from benchsets.models.map import Map
from benchsets.models.mod import Mod


def _non_negative_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Benchmark set field '{key}' must be an integer")
    if value < 0:
        raise ValueError(f"Benchmark set field '{key}' must be non-negative, got {value}")
    return value


@dataclass
class BenchmarkSet:
    """
    Represents a named benchmark configuration.

    The name itself is the key under which the set is stored and is not
    part of the record.
    """

    save_subdirectory: Optional[Path] = None  # Omitted from the file when unset
    mods: Set[Mod] = field(default_factory=set)
    maps: Set[Map] = field(default_factory=set)
    ticks: int = 0  # Ticks per run
    runs: int = 0  # Repetitions

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert benchmark set to its persisted dictionary form.

        Mods and maps are emitted in sorted order so the same set always
        produces the same output.

        Returns:
            Dictionary representation of the benchmark set
        """
        data: Dict[str, Any] = {}
        if self.save_subdirectory is not None:
            data["save_subdirectory"] = str(self.save_subdirectory)
        data["mods"] = [m.to_dict() for m in sorted(self.mods)]
        data["maps"] = [m.to_dict() for m in sorted(self.maps)]
        data["ticks"] = self.ticks
        data["runs"] = self.runs
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkSet":
        """
        Create a BenchmarkSet from its persisted dictionary form.

        Args:
            data: Dictionary containing the benchmark set data

        Returns:
            BenchmarkSet instance

        Raises:
            ValueError: If a field has the wrong type or a count is negative
            KeyError: If a required field is missing
        """
        if not isinstance(data, dict):
            raise ValueError(f"Benchmark set must be an object, got {type(data).__name__}")

        save_subdirectory = data.get("save_subdirectory")
        if save_subdirectory is not None:
            if not isinstance(save_subdirectory, str):
                raise ValueError("Benchmark set field 'save_subdirectory' must be a string")
            save_subdirectory = Path(save_subdirectory)

        if not isinstance(data["mods"], list) or not isinstance(data["maps"], list):
            raise ValueError("Benchmark set fields 'mods' and 'maps' must be lists")

        return cls(
            save_subdirectory=save_subdirectory,
            mods={Mod.from_dict(m) for m in data["mods"]},
            maps={Map.from_dict(m) for m in data["maps"]},
            ticks=_non_negative_int(data, "ticks"),
            runs=_non_negative_int(data, "runs"),
        )
