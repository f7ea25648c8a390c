#!/usr/bin/env python3
"""
Storage module for the benchmark set procedures.

This module reads and writes the procedure file: a single JSON document
holding every benchmark set and meta set. The file is always read in full
and rewritten in full; there is no locking and no atomic replace, so only
one writer may use a file at a time.
"""

import json
from pathlib import Path
from typing import Union

from loguru import logger

from benchsets.infra.errors import MalformedContent, NotFound, ReadError
from benchsets.models.document import Document


def decode(data: Union[bytes, str], path: Union[str, Path, None] = None) -> Document:
    """
    Decode the content of a procedure file.

    Args:
        data: Raw file content
        path: File the content came from (only used in error messages)

    Returns:
        Decoded Document

    Raises:
        MalformedContent: If the content is not JSON or not a valid document
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedContent(path, f"invalid JSON: {e}") from e

    try:
        return Document.from_dict(raw)
    except KeyError as e:
        raise MalformedContent(path, f"missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise MalformedContent(path, str(e)) from e


def encode(document: Document) -> str:
    """
    Encode a document as pretty-printed JSON with sorted keys.

    Args:
        document: Document to encode

    Returns:
        JSON text
    """
    return json.dumps(document.to_dict(), indent=2, sort_keys=True)


def load(path: Union[str, Path]) -> Document:
    """
    Load the document stored in a procedure file.

    Args:
        path: Path to the procedure file

    Returns:
        Loaded Document

    Raises:
        NotFound: If the file does not exist
        ReadError: If the file exists but cannot be read
        MalformedContent: If the file does not contain a valid document
    """
    path = Path(path)
    if not path.exists():
        raise NotFound(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(path, str(e)) from e

    document = decode(data, path)
    logger.debug(
        "Loaded {} benchmark set(s) and {} meta set(s) from {}",
        len(document.benchmark_sets),
        len(document.meta_sets),
        path,
    )
    return document


def store(path: Union[str, Path], document: Document) -> Path:
    """
    Overwrite a procedure file with the given document.

    OS errors are not caught; a failed write may leave the file truncated.

    Args:
        path: Path to the procedure file
        document: Document to write

    Returns:
        Path to the written file
    """
    path = Path(path)
    with open(path, "w") as f:
        f.write(encode(document))
    logger.debug("Wrote procedure file {}", path)
    return path
