"""
Errors raised by the benchmark set procedures.

Every error derives from ProcedureError. The load failures also derive from
the matching builtin (FileNotFoundError, ValueError, OSError) so callers can
catch them the usual way.
"""

from pathlib import Path
from typing import Optional, Union


class ProcedureError(Exception):
    """Base class for procedure file errors."""


class AlreadyExists(ProcedureError):
    """A procedure with this name already exists and overwrite was not requested."""

    def __init__(self, name: str, kind: str = "procedure"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind} '{name}' already exists (use overwrite to replace it)")


class NotFound(ProcedureError, FileNotFoundError):
    """The procedure file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Procedure file not found: {path}")

    def __str__(self) -> str:
        return f"Procedure file not found: {self.path}"


class MalformedContent(ProcedureError, ValueError):
    """The procedure file exists but does not contain a valid document."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Malformed procedure document{where}: {reason}")


class ReadError(ProcedureError, OSError):
    """The procedure file exists but could not be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read procedure file {path}: {reason}")

    def __str__(self) -> str:
        return f"Could not read procedure file {self.path}: {self.reason}"
