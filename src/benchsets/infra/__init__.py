"""
Infrastructure and I/O for the benchmark set procedures.

Contains:
- errors: Error taxonomy
- storage: Procedure file codec, load and store
- hashing: Content hashes for mods and maps
- config: Environment and YAML settings
- logs: Logging setup
"""

from .errors import AlreadyExists, MalformedContent, NotFound, ProcedureError, ReadError
