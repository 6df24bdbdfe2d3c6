"""Adapters (infrastructure) for CATDOC.

Provide concrete implementations of the interfaces, e.g. snapshot sources
backed by memory or by JSON files.

Dependency rule: may import `catdoc.domain` and `catdoc.interfaces`; the
domain must not import this package.
"""
