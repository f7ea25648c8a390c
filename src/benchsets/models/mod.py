#!/usr/bin/env python3
"""
Mod module for the benchmark set procedures.

A Mod identifies one versioned mod archive used by a benchmark set. Two mods
are the same mod when they share a non-empty sha1; everything else is only
used for display and ordering.
"""

from dataclasses import dataclass
from functools import total_ordering
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from benchsets.infra.hashing import sha1_file


@total_ordering
@dataclass(frozen=True, eq=False)
class Mod:
    """
    Represents a mod referenced by a benchmark set.

    `file_name` is the local archive name and is never persisted; it is
    supplied again by whoever builds the Mod at load time.
    """

    name: str  # Display name
    file_name: str = ""  # Local archive name (not persisted)
    version: str = ""
    sha1: str = ""  # Content hash, identity of the mod

    def _sort_key(self) -> Tuple[str, str, str, str]:
        return (self.name, self.file_name, self.version, self.sha1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mod):
            return NotImplemented
        # Mods without a hash are never equal to each other
        return self.sha1 == other.sha1 and self.sha1 != ""

    def __lt__(self, other: "Mod") -> bool:
        if not isinstance(other, Mod):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self.sha1)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert mod to its persisted dictionary form.

        Returns:
            Dictionary with name, version and sha1 (file_name is excluded)
        """
        return {
            "name": self.name,
            "version": self.version,
            "sha1": self.sha1,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mod":
        """
        Create a Mod from its persisted dictionary form.

        Args:
            data: Dictionary containing name, version and sha1

        Returns:
            Mod instance with an empty file_name

        Raises:
            ValueError: If data is not a mapping or a field is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"Mod entry must be an object, got {type(data).__name__}")
        values = {key: data[key] for key in ("name", "version", "sha1")}
        for key, value in values.items():
            if not isinstance(value, str):
                raise ValueError(f"Mod field '{key}' must be a string")
        return cls(**values)

    @classmethod
    def from_file(cls, path: Union[str, Path], name: str, version: str) -> "Mod":
        """
        Create a Mod from a mod archive on disk, hashing its content.

        Args:
            path: Path to the mod archive
            name: Display name of the mod
            version: Version string of the mod

        Returns:
            Mod instance with file_name and sha1 filled in
        """
        path = Path(path)
        return cls(name=name, file_name=path.name, version=version, sha1=sha1_file(path))
