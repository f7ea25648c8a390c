"""
Benchmark Set Procedures

Persisted benchmark sets and meta sets, and resolution of meta sets into the
benchmark sets they reference.

Package structure:
- models/: Data models (mod, map, benchmark set, document)
- infra/: Infrastructure (errors, storage, hashing, config, logs)
- core/: Core logic (procedures, resolver)
- frontend: Command line interface
"""

__version__ = "1.0.0"
