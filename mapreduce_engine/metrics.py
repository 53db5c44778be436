"""
Performance metrics collection for engine runs.
"""

import time
import json
import psutil
from dataclasses import dataclass, asdict
from typing import Dict, Optional


@dataclass
class JobMetrics:
    """Metrics for a single Engine.run invocation."""

    job_id: str
    start_time: float
    num_input_items: int
    end_time: float = 0.0
    map_phase_start: float = 0.0
    map_phase_end: float = 0.0
    reduce_phase_start: float = 0.0
    reduce_phase_end: float = 0.0
    map_tasks_launched: int = 0
    map_tasks_failed: int = 0
    num_keys: int = 0
    reduce_tasks_launched: int = 0
    reduce_tasks_failed: int = 0
    peak_memory_bytes: int = 0

    @property
    def total_time_seconds(self) -> float:
        """Total run time in seconds."""
        return self.end_time - self.start_time

    @property
    def map_phase_time_seconds(self) -> float:
        """Map phase execution time in seconds."""
        return self.map_phase_end - self.map_phase_start

    @property
    def reduce_phase_time_seconds(self) -> float:
        """Reduce phase execution time in seconds."""
        return self.reduce_phase_end - self.reduce_phase_start

    @property
    def failed_tasks(self) -> int:
        return self.map_tasks_failed + self.reduce_tasks_failed

    def to_dict(self) -> dict:
        """Convert metrics to dictionary, derived timings included."""
        data = asdict(self)
        data['total_time_seconds'] = self.total_time_seconds
        data['map_phase_time_seconds'] = self.map_phase_time_seconds
        data['reduce_phase_time_seconds'] = self.reduce_phase_time_seconds
        return data

    def save_to_file(self, filepath: str):
        """Save metrics to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


class MetricsCollector:
    """Collects metrics for engine runs, keyed by job id."""

    def __init__(self):
        self.job_metrics: Dict[str, JobMetrics] = {}
        self.process = psutil.Process()

    def _sample_memory(self, metrics: JobMetrics):
        rss = self.process.memory_info().rss
        if rss > metrics.peak_memory_bytes:
            metrics.peak_memory_bytes = rss

    def start_job(self, job_id: str, num_input_items: int) -> JobMetrics:
        """Initialize metrics tracking for a new run; the map phase starts now."""
        now = time.time()
        metrics = JobMetrics(
            job_id=job_id,
            start_time=now,
            num_input_items=num_input_items,
            map_phase_start=now,
        )
        self._sample_memory(metrics)
        self.job_metrics[job_id] = metrics
        return metrics

    def end_map_phase(self, job_id: str, launched: int, failed: int):
        """Mark the end of the map phase."""
        metrics = self.job_metrics.get(job_id)
        if metrics:
            metrics.map_phase_end = time.time()
            metrics.map_tasks_launched = launched
            metrics.map_tasks_failed = failed
            self._sample_memory(metrics)

    def start_reduce_phase(self, job_id: str, num_keys: int):
        """Mark the start of the reduce phase once grouping is done."""
        metrics = self.job_metrics.get(job_id)
        if metrics:
            metrics.reduce_phase_start = time.time()
            metrics.num_keys = num_keys
            self._sample_memory(metrics)

    def end_job(self, job_id: str, launched: int, failed: int):
        """Mark run completion."""
        metrics = self.job_metrics.get(job_id)
        if metrics:
            now = time.time()
            metrics.reduce_phase_end = now
            metrics.end_time = now
            metrics.reduce_tasks_launched = launched
            metrics.reduce_tasks_failed = failed
            self._sample_memory(metrics)

    def get_metrics(self, job_id: str) -> Optional[JobMetrics]:
        """Retrieve metrics for a specific run."""
        return self.job_metrics.get(job_id)
