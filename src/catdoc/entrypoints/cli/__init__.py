"""The ``catdoc`` command-line interface."""
