"""Content hashes for mod archives and map save files."""

import hashlib
from pathlib import Path
from typing import Union

CHUNK_SIZE = 1024 * 1024


def _hash_file(path: Union[str, Path], algorithm: str) -> str:
    digest = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def sha1_file(path: Union[str, Path]) -> str:
    """Calculate the SHA1 hex digest of a file (used to identify mods)."""
    return _hash_file(path, "sha1")


def sha256_file(path: Union[str, Path]) -> str:
    """Calculate the SHA256 hex digest of a file (used to identify maps)."""
    return _hash_file(path, "sha256")
