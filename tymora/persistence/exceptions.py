"""Persistence exception definitions.

Reading a snapshot can fail in two distinct ways: the bytes could not be
read at all, or they were read but do not describe a valid die or bag.
"""


class SnapshotError(Exception):
    """Base exception for snapshot persistence."""

    pass


class SnapshotReadError(SnapshotError):
    """A snapshot could not be read or written.

    Attributes:
        path: File involved, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class SnapshotFormatError(SnapshotError):
    """A snapshot was read but is corrupt or invalid.

    Attributes:
        raw_data: The data that failed to parse, if available.
    """

    def __init__(self, message: str, raw_data: str | bytes | None = None) -> None:
        super().__init__(message)
        self.raw_data = raw_data
