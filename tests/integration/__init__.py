"""Integration tests.

Purpose
- Exercise adapters against the real filesystem.

Guidelines
- Write files under tmp_path only.
- Minimize mocking; read back what was actually written.
"""
