"""Unit tests.

Purpose
- Check entities, services and CLI helpers in isolation.

Guidelines
- No snapshot files: build graphs in memory with the `tests.fixtures.graphs`
  fixtures and decode documents straight from dicts.
- Assert on returned values and reported messages, not on internals.
"""
