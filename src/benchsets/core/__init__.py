"""
Core logic for the benchmark set procedures.

Contains:
- procedures: Reading and writing benchmark sets and meta sets
- resolver: Meta set resolution
"""

from .procedures import (
    load_procedures,
    read_benchmark_set,
    read_meta,
    write_benchmark_set,
    write_meta,
)
from .resolver import (
    get_metas_from_meta,
    get_sets_from_meta,
    resolve_benchmarks,
    resolve_meta_names,
)
