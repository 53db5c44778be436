"""
TaskRunner, fans a function out over a sequence of inputs on a thread pool
and fans the results back in, isolating every task's failure.
"""

import time
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed

from mapreduce_engine.errors import ItemError, TaskFailure

logger = logging.getLogger(__name__)


class TaskStatus(Enum):
    """Terminal state of a single task"""
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class PhaseResult:
    """Everything fan-in collected for one phase"""
    phase: str
    launched: int = 0
    outputs: List[Any] = field(default_factory=list)
    failures: List[TaskFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def succeeded(self) -> int:
        return len(self.outputs)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def status_of(self, index: int) -> Optional[TaskStatus]:
        """Status of the task launched for inputs[index], None if unknown."""
        if not 0 <= index < self.launched:
            return None
        if any(f.index == index for f in self.failures):
            return TaskStatus.FAILED
        return TaskStatus.COMPLETED


def _call(fn: Callable, item):
    """Run one unit; a returned ItemError counts as a raised one."""
    output = fn(item)
    if isinstance(output, ItemError):
        raise output
    return output


class TaskRunner:
    def __init__(self, phase: str = "map", max_workers: Optional[int] = None):
        """
        Args:
            phase: Label used in logs and TaskFailure records
            max_workers: Cap on simultaneous tasks, None for one thread per input
        """
        self.phase = phase
        self.max_workers = max_workers

    def _record_failure(self, result: PhaseResult, index: int, item, cause: BaseException):
        failure = TaskFailure(self.phase, index, item, cause)
        result.failures.append(failure)
        logger.error(str(failure), exc_info=cause)

    def fan_out(self, inputs: Iterable, fn: Callable,
                describe: Optional[Callable[[Any], Any]] = None) -> PhaseResult:
        """
        Call fn once per input concurrently and wait for every call to finish.

        Args:
            inputs: Items to process, one task each
            fn: Function applied to each item
            describe: Maps an item to what failure logs should show (defaults to the item)

        Returns:
            PhaseResult with successful outputs in completion order and
            one TaskFailure per task that raised, exited, or could not be launched
        """
        inputs = list(inputs)
        result = PhaseResult(phase=self.phase, launched=len(inputs))
        if not inputs:
            logger.debug(f"{self.phase} phase: nothing to run")
            return result

        describe = describe or (lambda item: item)
        workers = min(self.max_workers or len(inputs), len(inputs))
        start_time = time.time()
        logger.debug(f"{self.phase} phase: launching {len(inputs)} tasks on {workers} threads")

        with ThreadPoolExecutor(max_workers=workers,
                                thread_name_prefix=f"{self.phase}-task") as pool:
            futures = {}
            for index, item in enumerate(inputs):
                try:
                    futures[pool.submit(_call, fn, item)] = index
                except RuntimeError as e:
                    # Pool can't take more work (e.g. no threads left); nothing after this launches
                    logger.warning(f"{self.phase} phase: stopped launching at task {index} of {len(inputs)}")
                    for skipped in range(index, len(inputs)):
                        self._record_failure(result, skipped, describe(inputs[skipped]), e)
                    break

            for future in as_completed(futures):
                index = futures[future]
                try:
                    result.outputs.append(future.result())
                except BaseException as e:
                    self._record_failure(result, index, describe(inputs[index]), e)

        result.elapsed_seconds = time.time() - start_time
        logger.debug(f"{self.phase} phase: {result.succeeded} succeeded, "
                     f"{result.failed} failed in {result.elapsed_seconds:.3f}s")
        return result
