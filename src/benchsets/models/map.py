#!/usr/bin/env python3
"""
Map module for the benchmark set procedures.

A Map identifies a save file (map) a benchmark is run against. Maps are
identified by their sha256, and unlike mods, two maps without a hash count
as the same map.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from benchsets.infra.hashing import sha256_file


@total_ordering
@dataclass(frozen=True, eq=False)
class Map:
    """
    Represents a map referenced by a benchmark set.

    The name is always derived from the base name of `path` and cannot be
    passed in. `path` is never persisted, so maps read back from a procedure
    file carry their stored name and no path.
    """

    path: Optional[Path]  # Local location of the map (not persisted)
    sha256: str = ""  # Content hash, identity of the map
    download_link: str = ""
    name: str = field(init=False)

    def __post_init__(self):
        if self.path is not None:
            object.__setattr__(self, "path", Path(self.path))
            object.__setattr__(self, "name", self.path.name)
        else:
            object.__setattr__(self, "name", "")

    def _sort_key(self) -> Tuple[str, str, str, str]:
        return (self.name, str(self.path or ""), self.sha256, self.download_link)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self.sha256 == other.sha256

    def __lt__(self, other: "Map") -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self.sha256)

    def to_dict(self) -> Dict[str, Any]:
        """Convert map to its persisted dictionary form (path is excluded)."""
        return {
            "name": self.name,
            "sha256": self.sha256,
            "download_link": self.download_link,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Map":
        """
        Create a Map from its persisted dictionary form.

        Args:
            data: Dictionary containing name, sha256 and download_link

        Returns:
            Map instance with the stored name and no path

        Raises:
            ValueError: If data is not a mapping or a field is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"Map entry must be an object, got {type(data).__name__}")
        for key in ("name", "sha256", "download_link"):
            if not isinstance(data[key], str):
                raise ValueError(f"Map field '{key}' must be a string")

        map_ = cls(path=None, sha256=data["sha256"], download_link=data["download_link"])
        object.__setattr__(map_, "name", data["name"])
        return map_

    @classmethod
    def from_file(cls, path: Union[str, Path], download_link: str = "") -> "Map":
        """
        Create a Map from a save file on disk, hashing its content.

        Args:
            path: Path to the save file
            download_link: URL the map can be retrieved from

        Returns:
            Map instance with name and sha256 filled in
        """
        path = Path(path)
        return cls(path=path, sha256=sha256_file(path), download_link=download_link)
