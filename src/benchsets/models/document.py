#!/usr/bin/env python3
"""
Document module for the benchmark set procedures.

The Document is everything stored in one procedure file: the benchmark sets
and the meta sets, both keyed by name. A name may appear in both mappings.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Set

from benchsets.models.benchmark_set import BenchmarkSet


class ProcedureKind(Enum):
    """Selects which kind of procedure a listing or command applies to."""

    BENCHMARK = "benchmark"
    META = "meta"
    BOTH = "both"

    @classmethod
    def from_str(cls, value: str) -> "ProcedureKind":
        """
        Parse a procedure kind, ignoring case.

        Raises:
            ValueError: If the value is not benchmark, meta or both
        """
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown procedure kind: {value}") from None

    def includes_benchmarks(self) -> bool:
        return self in (ProcedureKind.BENCHMARK, ProcedureKind.BOTH)

    def includes_metas(self) -> bool:
        return self in (ProcedureKind.META, ProcedureKind.BOTH)


@dataclass
class Document:
    """
    Top level of a procedure file.

    benchmark_sets maps a name to its BenchmarkSet. meta_sets maps a name to
    the names of its members, each of which may be a benchmark set or
    another meta set.
    """

    benchmark_sets: Dict[str, BenchmarkSet] = field(default_factory=dict)
    meta_sets: Dict[str, Set[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the document to its persisted dictionary form.

        Keys and meta set members are emitted in sorted order.
        """
        return {
            "benchmark_sets": {
                name: self.benchmark_sets[name].to_dict()
                for name in sorted(self.benchmark_sets)
            },
            "meta_sets": {
                name: sorted(self.meta_sets[name])
                for name in sorted(self.meta_sets)
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """
        Create a Document from its persisted dictionary form.

        Args:
            data: Decoded JSON content of a procedure file

        Returns:
            Document instance

        Raises:
            ValueError: If the structure is not a valid document
            KeyError: If a required key is missing
        """
        if not isinstance(data, dict):
            raise ValueError(f"Document must be an object, got {type(data).__name__}")

        raw_sets = data["benchmark_sets"]
        raw_metas = data["meta_sets"]
        if not isinstance(raw_sets, dict) or not isinstance(raw_metas, dict):
            raise ValueError("'benchmark_sets' and 'meta_sets' must be objects")

        meta_sets = {}
        for name, members in raw_metas.items():
            if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
                raise ValueError(f"Meta set '{name}' must be a list of names")
            meta_sets[name] = set(members)

        return cls(
            benchmark_sets={name: BenchmarkSet.from_dict(s) for name, s in raw_sets.items()},
            meta_sets=meta_sets,
        )

    def get_benchmark_set(self, name: str):
        """Return a copy of the named benchmark set, or None."""
        if name not in self.benchmark_sets:
            return None
        return copy.deepcopy(self.benchmark_sets[name])

    def get_meta(self, name: str):
        """Return a copy of the named meta set's members, or None."""
        if name not in self.meta_sets:
            return None
        return set(self.meta_sets[name])

    def summary(self, kind: ProcedureKind = ProcedureKind.BOTH) -> str:
        """
        Format the names of the stored procedures as a listing.

        Args:
            kind: Which procedures to include

        Returns:
            Formatted listing string
        """
        lines: List[str] = []
        if kind.includes_benchmarks():
            lines.append("    Benchmark Sets:")
            lines.extend(f"\t{name}" for name in sorted(self.benchmark_sets))
        if kind.includes_metas():
            lines.append("    Meta Sets:")
            lines.extend(f"\t{name}" for name in sorted(self.meta_sets))
        return "\n".join(lines)
