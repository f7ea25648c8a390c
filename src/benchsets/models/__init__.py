"""
Data models for the benchmark set procedures.

Contains:
- mod: Mod dataclass
- map: Map dataclass
- benchmark_set: BenchmarkSet dataclass
- document: Document (top level of a procedure file) and ProcedureKind
"""

from .mod import Mod
from .map import Map
from .benchmark_set import BenchmarkSet
from .document import Document, ProcedureKind
