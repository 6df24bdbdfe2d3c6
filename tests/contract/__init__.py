"""Contract tests.

Purpose
- Define SnapshotSource behaviour once and run it against every adapter so
  the backends stay interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
