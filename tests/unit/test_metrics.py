"""
Unit tests for metrics collection
"""

import json
import os

from mapreduce_engine.metrics import JobMetrics, MetricsCollector


class TestJobMetrics:
    """Tests for derived values and serialization"""

    def make_metrics(self):
        return JobMetrics(
            job_id='abc',
            start_time=100.0,
            num_input_items=10,
            end_time=104.0,
            map_phase_start=100.0,
            map_phase_end=101.5,
            reduce_phase_start=102.0,
            reduce_phase_end=104.0,
            map_tasks_launched=10,
            map_tasks_failed=1,
            num_keys=3,
            reduce_tasks_launched=3,
            reduce_tasks_failed=1,
        )

    def test_durations(self):
        metrics = self.make_metrics()

        assert metrics.total_time_seconds == 4.0
        assert metrics.map_phase_time_seconds == 1.5
        assert metrics.reduce_phase_time_seconds == 2.0
        assert metrics.failed_tasks == 2

    def test_save_to_file(self, temp_dir):
        path = os.path.join(temp_dir, 'metrics.json')

        self.make_metrics().save_to_file(path)

        with open(path) as f:
            data = json.load(f)
        assert data['job_id'] == 'abc'
        assert data['num_keys'] == 3
        assert data['total_time_seconds'] == 4.0


class TestMetricsCollector:
    """Tests for the per-phase bookkeeping"""

    def test_full_lifecycle(self):
        collector = MetricsCollector()

        collector.start_job('job-1', num_input_items=4)
        collector.end_map_phase('job-1', launched=4, failed=1)
        collector.start_reduce_phase('job-1', num_keys=2)
        collector.end_job('job-1', launched=2, failed=0)

        metrics = collector.get_metrics('job-1')
        assert metrics.map_tasks_launched == 4
        assert metrics.map_tasks_failed == 1
        assert metrics.num_keys == 2
        assert metrics.reduce_tasks_launched == 2
        assert metrics.end_time >= metrics.reduce_phase_start >= metrics.map_phase_end
        assert metrics.peak_memory_bytes > 0

    def test_unknown_job_is_ignored(self):
        collector = MetricsCollector()

        collector.end_map_phase('missing', launched=1, failed=0)
        collector.end_job('missing', launched=1, failed=0)

        assert collector.get_metrics('missing') is None
