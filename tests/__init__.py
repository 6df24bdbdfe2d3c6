"""CATDOC test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the filesystem.
- contract/     : Shared behavior enforced across every SnapshotSource.
- e2e/          : The `catdoc` command driven through Click's test runner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); build graphs with
  `tests.fixtures.graphs.build_category`.
- Integration and e2e tests write snapshots under tmp_path or an isolated
  filesystem only.
- Suggested markers: unit, integration, contract, e2e
"""
