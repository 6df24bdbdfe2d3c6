"""Errors raised by snapshot sources."""


class SnapshotError(Exception):
    """Base class for all snapshot-loading errors."""


class SnapshotNotFoundError(SnapshotError):
    """Raised when the snapshot location does not exist."""

    def __init__(self, location: str) -> None:
        super().__init__(f"Snapshot not found: {location}")
        self.location = location


class SnapshotFormatError(SnapshotError):
    """Raised when a snapshot cannot be decoded into entities."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Malformed snapshot {location}: {reason}")
        self.location = location
        self.reason = reason


class SnapshotUnreadableError(SnapshotError):
    """Raised when the snapshot location exists but cannot be read."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Cannot read snapshot {location}: {reason}")
        self.location = location
        self.reason = reason
