#!/usr/bin/env python3
"""
Procedures module for the benchmark set procedures.

Reads and writes single benchmark sets and meta sets in a procedure file.
Every call loads the whole file and, for writes, rewrites the whole file.

Load failures are handled differently depending on the call:
- reads return None, whether the file or the name is missing;
- writes start from an empty document when the file cannot be loaded.
Use load_procedures() directly to tell the load failures apart.
"""

from pathlib import Path
from typing import Iterable, Optional, Set, Union

from loguru import logger

from benchsets.infra import storage
from benchsets.infra.errors import AlreadyExists, NotFound, ProcedureError
from benchsets.models.benchmark_set import BenchmarkSet
from benchsets.models.document import Document

load_procedures = storage.load


def _load_or_empty(path: Path) -> Document:
    try:
        return storage.load(path)
    except NotFound:
        return Document()
    except ProcedureError as e:
        logger.warning("Ignoring unreadable procedure file, it will be replaced: {}", e)
        return Document()


def read_benchmark_set(name: str, path: Union[str, Path]) -> Optional[BenchmarkSet]:
    """
    Read a benchmark set from a procedure file.

    Args:
        name: Name of the benchmark set
        path: Path to the procedure file

    Returns:
        Copy of the benchmark set, or None if the file cannot be loaded or
        does not contain the set
    """
    try:
        document = storage.load(path)
    except ProcedureError as e:
        logger.debug("Cannot read benchmark set '{}': {}", name, e)
        return None
    return document.get_benchmark_set(name)


def write_benchmark_set(
    name: str,
    benchmark_set: BenchmarkSet,
    overwrite: bool,
    path: Union[str, Path],
) -> None:
    """
    Write a benchmark set to a procedure file, creating the file if needed.

    Args:
        name: Name to store the benchmark set under
        benchmark_set: Benchmark set to store
        overwrite: Replace an existing benchmark set with the same name
        path: Path to the procedure file

    Raises:
        AlreadyExists: If the name is taken and overwrite is false (nothing is written)
    """
    path = Path(path)
    document = _load_or_empty(path)
    if name in document.benchmark_sets and not overwrite:
        raise AlreadyExists(name, kind="Benchmark set")

    document.benchmark_sets[name] = benchmark_set
    storage.store(path, document)
    logger.debug("Stored benchmark set '{}' in {}", name, path)


def read_meta(name: str, path: Union[str, Path]) -> Optional[Set[str]]:
    """
    Read the members of a meta set from a procedure file.

    Args:
        name: Name of the meta set
        path: Path to the procedure file

    Returns:
        Copy of the member names, or None if the file cannot be loaded or
        does not contain the meta set
    """
    try:
        document = storage.load(path)
    except ProcedureError as e:
        logger.debug("Cannot read meta set '{}': {}", name, e)
        return None
    return document.get_meta(name)


def write_meta(
    name: str,
    members: Iterable[str],
    overwrite: bool,
    path: Union[str, Path],
) -> None:
    """
    Write a meta set to a procedure file, creating the file if needed.

    Args:
        name: Name to store the meta set under
        members: Names of the benchmark sets and meta sets it groups
        overwrite: Replace an existing meta set with the same name
        path: Path to the procedure file

    Raises:
        AlreadyExists: If the name is taken and overwrite is false (nothing is written)
    """
    path = Path(path)
    document = _load_or_empty(path)
    if name in document.meta_sets and not overwrite:
        raise AlreadyExists(name, kind="Meta set")

    document.meta_sets[name] = set(members)
    storage.store(path, document)
    logger.debug("Stored meta set '{}' in {}", name, path)
