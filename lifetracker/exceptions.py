"""Errors raised by the tracking services."""


class LifeTrackerError(Exception):
    """Base class for all application errors."""


class InvalidInputError(LifeTrackerError, ValueError):
    """A user submission was rejected before any state changed."""


class CorruptPersistedStateError(LifeTrackerError):
    """A stored value could not be decoded into the expected collection."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored value for {key!r} is corrupt: {reason}")
        self.key = key
        self.reason = reason


class PersistenceWriteError(LifeTrackerError):
    """Writing a value to the key/value store failed."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not write {key!r}: {reason}")
        self.key = key
        self.reason = reason
