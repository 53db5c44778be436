"""
Engine, runs the map -> group -> reduce pipeline over an in-memory input sequence.
"""

import copy
import uuid
import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from mapreduce_engine.aggregator import group
from mapreduce_engine.config import EngineConfig
from mapreduce_engine.errors import ItemError, TaskFailure
from mapreduce_engine.metrics import JobMetrics, MetricsCollector
from mapreduce_engine.task_runner import TaskRunner

logger = logging.getLogger(__name__)


class JobStatus(Enum):
    """Where the engine is in its pipeline"""
    PENDING = "pending"
    MAP_PHASE = "map_phase"
    SHUFFLE_PHASE = "shuffle_phase"
    REDUCE_PHASE = "reduce_phase"
    COMPLETED = "completed"


class Engine:
    """Owns an input sequence and runs map/reduce jobs over it."""

    def __init__(self, items: Iterable, config: Optional[EngineConfig] = None):
        self.items = list(items)
        self.config = config or EngineConfig()
        self.status = JobStatus.PENDING
        self.collector = MetricsCollector()
        self.job_id: Optional[str] = None
        self.failures: List[TaskFailure] = []

    @property
    def metrics(self) -> Optional[JobMetrics]:
        """Metrics of the most recent run, None before the first one."""
        if self.job_id is None:
            return None
        return self.collector.get_metrics(self.job_id)

    def _map_task(self, mapper: Callable) -> Callable:
        copy_inputs = self.config.copy_inputs

        def run_mapper(item):
            if copy_inputs:
                item = copy.deepcopy(item)
            pair = mapper(item)
            if isinstance(pair, ItemError):
                return pair
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise TypeError(f"mapper must return a (key, value) tuple, got {pair!r}")
            # Grouping needs hashable keys; fail this item now rather than the whole shuffle
            hash(pair[0])
            return pair

        return run_mapper

    def run(self, mapper: Callable, reducer: Callable) -> None:
        """
        Map every item, group the results by key, and reduce every group.

        Failed tasks are logged and dropped; this method returns once every
        reduce task has finished and never raises because of a task.

        Args:
            mapper: item -> (key, value); may raise or return ItemError to reject an item
            reducer: (key, values) -> None, called once per distinct key
        """
        self.job_id = uuid.uuid4().hex[:12]
        self.failures = []
        self.collector.start_job(self.job_id, len(self.items))
        logger.info(f"Job {self.job_id}: map phase over {len(self.items)} items")

        self.status = JobStatus.MAP_PHASE
        map_runner = TaskRunner("map", self.config.max_concurrent_map_tasks)
        mapped = map_runner.fan_out(self.items, self._map_task(mapper))
        self.failures.extend(mapped.failures)
        self.collector.end_map_phase(self.job_id, mapped.launched, mapped.failed)

        self.status = JobStatus.SHUFFLE_PHASE
        grouped = group(mapped.outputs)
        self.collector.start_reduce_phase(self.job_id, len(grouped))
        logger.info(f"Job {self.job_id}: {mapped.succeeded} map results "
                    f"grouped into {len(grouped)} keys ({mapped.failed} map failures)")

        self.status = JobStatus.REDUCE_PHASE
        reduce_runner = TaskRunner("reduce", self.config.max_concurrent_reduce_tasks)
        reduced = reduce_runner.fan_out(
            grouped.items(),
            lambda entry: reducer(entry[0], entry[1]),
            describe=lambda entry: entry[0],
        )
        self.failures.extend(reduced.failures)
        self.collector.end_job(self.job_id, reduced.launched, reduced.failed)

        self.status = JobStatus.COMPLETED
        logger.info(f"Job {self.job_id}: completed, {reduced.launched} reduce tasks "
                    f"({reduced.failed} failed)")
