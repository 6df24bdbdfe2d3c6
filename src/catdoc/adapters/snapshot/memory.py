"""In-memory snapshot source."""

from catdoc.domain.snapshot import KnowledgeGraph
from catdoc.interfaces.snapshot_source import SnapshotSource


class InMemorySnapshotSource(SnapshotSource):
    """SnapshotSource that hands back a graph it was given."""

    def __init__(self, graph: KnowledgeGraph | None = None) -> None:
        self._graph = graph if graph is not None else KnowledgeGraph()

    def load(self) -> KnowledgeGraph:
        return self._graph
