"""Entrypoints for CATDOC (command-line interface)."""
