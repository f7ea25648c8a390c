#!/usr/bin/env python3
"""
Resolver module for the benchmark set procedures.

Expands a meta set into everything it references, following meta sets
inside meta sets. Meta sets may reference each other in cycles; every name
is expanded at most once, so resolution always terminates.

Both walks use an explicit stack instead of recursion. Members are visited
in sorted order, the same order they are stored in.
"""

from pathlib import Path
from typing import Dict, List, Set, Union

from benchsets.infra import storage
from benchsets.models.benchmark_set import BenchmarkSet
from benchsets.models.document import Document


def resolve_benchmarks(start_key: str, document: Document) -> Dict[str, BenchmarkSet]:
    """
    Collect every benchmark set reachable from a name.

    A name that is both a meta set and a benchmark set contributes its own
    benchmark set and is expanded as a meta set. Unknown names are ignored.

    Args:
        start_key: Name of a meta set (or benchmark set)
        document: Document to resolve against

    Returns:
        Dictionary of benchmark set name to BenchmarkSet
    """
    visited: Set[str] = set()
    result: Dict[str, BenchmarkSet] = {}

    # Entries are (key, expanded); a key is pushed again once its members
    # are done so its own benchmark set is recorded after them.
    stack = [(start_key, False)]
    while stack:
        key, expanded = stack.pop()
        if not expanded:
            if key in visited:
                continue
            if key in document.meta_sets:
                visited.add(key)
                stack.append((key, True))
                for member in sorted(document.meta_sets[key], reverse=True):
                    stack.append((member, False))
                continue
        if key in document.benchmark_sets:
            result[key] = document.benchmark_sets[key]

    return result


def resolve_meta_names(start_key: str, document: Document) -> List[str]:
    """
    List every meta set reachable from a name, in depth-first finish order.

    A meta set is listed only after all meta sets below it, and at most
    once. Names that are not meta sets are skipped.

    Args:
        start_key: Name of a meta set
        document: Document to resolve against

    Returns:
        List of meta set names, the start key last if it is a meta set
    """
    visited: Set[str] = set()
    result: List[str] = []

    stack = [(start_key, False)]
    while stack:
        key, expanded = stack.pop()
        if expanded:
            result.append(key)
            continue
        if key in visited or key not in document.meta_sets:
            continue
        visited.add(key)
        stack.append((key, True))
        for member in sorted(document.meta_sets[key], reverse=True):
            stack.append((member, False))

    return result


def get_sets_from_meta(meta_set_key: str, path: Union[str, Path]) -> Dict[str, BenchmarkSet]:
    """
    Load a procedure file and collect the benchmark sets reachable from a meta set.

    Raises:
        NotFound, ReadError, MalformedContent: If the file cannot be loaded
    """
    return resolve_benchmarks(meta_set_key, storage.load(path))


def get_metas_from_meta(meta_set_key: str, path: Union[str, Path]) -> List[str]:
    """
    Load a procedure file and list the meta sets reachable from a meta set.

    Raises:
        NotFound, ReadError, MalformedContent: If the file cannot be loaded
    """
    return resolve_meta_names(meta_set_key, storage.load(path))
