"""Snapshot source interface definitions."""

import abc

from catdoc.domain.snapshot import KnowledgeGraph


class SnapshotSource(abc.ABC):
    """Abstract base class for anything that can produce a full snapshot."""

    @abc.abstractmethod
    def load(self) -> KnowledgeGraph:
        """Load the complete knowledge graph.

        Returns:
            KnowledgeGraph: Every category, functor and natural transformation
            known to the source.

        Raises:
            SnapshotNotFoundError: If the underlying location does not exist.
            SnapshotFormatError: If the content cannot be decoded into entities.
            SnapshotUnreadableError: If the location exists but cannot be read.
        """
