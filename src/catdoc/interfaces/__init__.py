"""Interfaces (application boundary) for CATDOC.

Defines framework-free contracts shared by entrypoints and adapters, such as
the port through which a complete knowledge-graph snapshot is loaded.

Dependency rule: may import `catdoc.domain` only. It may be imported by
`catdoc.adapters` and `catdoc.entrypoints`.
"""
