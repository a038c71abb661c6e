"""Exceptions raised by tasktrack."""


class TaskTrackError(Exception):
    """Base class for tasktrack errors."""


class PersistenceError(TaskTrackError):
    """Reading from or writing to the key-value storage failed.

    The in-memory task collection is unaffected; callers surface this as a
    recoverable "could not save" condition.
    """

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key
