"""In-process parallel MapReduce engine."""

from mapreduce_engine.aggregator import group
from mapreduce_engine.config import EngineConfig
from mapreduce_engine.engine import Engine, JobStatus
from mapreduce_engine.errors import (
    ConfigError,
    ItemError,
    JobFileError,
    MapReduceError,
    TaskFailure,
)
from mapreduce_engine.task_runner import PhaseResult, TaskRunner, TaskStatus

__all__ = [
    'ConfigError',
    'Engine',
    'EngineConfig',
    'ItemError',
    'JobFileError',
    'JobStatus',
    'MapReduceError',
    'PhaseResult',
    'TaskFailure',
    'TaskRunner',
    'TaskStatus',
    'group',
]
