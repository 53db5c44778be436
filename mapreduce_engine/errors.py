"""
Exception types for the local MapReduce engine.
"""


class MapReduceError(Exception):
    """Base class for all engine errors"""


class ConfigError(MapReduceError, ValueError):
    """Raised when an EngineConfig value is out of range"""


class JobFileError(MapReduceError):
    """Raised when a job file cannot provide map_fn/reduce_fn"""


class ItemError(MapReduceError):
    """
    A mapper's rejection of a single input item.

    Mappers may either raise this or return an instance of it; both are
    recorded as a TaskFailure for that item and the run continues.
    """

    def __init__(self, message: str, item=None):
        super().__init__(message)
        self.item = item


class TaskFailure(MapReduceError):
    """One map or reduce unit that terminated abnormally"""

    def __init__(self, phase: str, index: int, item, cause: BaseException):
        self.phase = phase
        self.index = index
        self.item = item
        self.cause = cause
        super().__init__(
            f"{phase} task {index} failed for {item!r}: "
            f"{type(cause).__name__}: {cause}"
        )
