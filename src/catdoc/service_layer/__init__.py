"""Service layer for CATDOC.

Implements the algorithmic core as stateless functions over immutable
snapshots: composition, traversal and verification, plus whole-snapshot
validation, presenter-ready trace reports, and the search, listing and
detail views used by the CLI.

Dependency rule: may import `catdoc.domain`, but not `catdoc.adapters` or
`catdoc.entrypoints`.
"""
