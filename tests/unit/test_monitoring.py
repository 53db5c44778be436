"""
Unit tests for run reporting helpers.
"""

import unittest

from mapreduce_engine.metrics import JobMetrics
from mapreduce_engine.monitoring import (
    format_duration,
    format_progress_bar,
    format_job_summary,
)


class TestMonitoring(unittest.TestCase):
    def test_format_duration(self):
        """Test duration formatting for different time ranges."""
        self.assertEqual(format_duration(0.25), "250ms")
        self.assertEqual(format_duration(0), "0ms")
        self.assertEqual(format_duration(30), "30.00s")
        self.assertEqual(format_duration(90), "1m 30.0s")
        self.assertEqual(format_duration(3675), "61m 15.0s")

    def test_format_progress_bar(self):
        """Test progress bar generation."""
        self.assertEqual(format_progress_bar(0, 10, width=20), "[....................] 0/10")
        self.assertEqual(format_progress_bar(5, 10, width=20), "[##########..........] 5/10")
        self.assertEqual(format_progress_bar(10, 10, width=20), "[####################] 10/10")

    def test_progress_bar_with_no_tasks(self):
        self.assertEqual(format_progress_bar(0, 0, width=4), "[....] 0/0")

    def test_job_summary(self):
        metrics = JobMetrics(
            job_id="job-7",
            start_time=0.0,
            num_input_items=4,
            end_time=2.0,
            map_phase_start=0.0,
            map_phase_end=1.0,
            reduce_phase_start=1.0,
            reduce_phase_end=2.0,
            map_tasks_launched=4,
            map_tasks_failed=1,
            num_keys=2,
            reduce_tasks_launched=2,
            peak_memory_bytes=50 * 1024 * 1024,
        )

        summary = format_job_summary(metrics)

        self.assertIn("Job ID: job-7", summary)
        self.assertIn("Runtime: 2.00s", summary)
        self.assertIn("] 3/4 in 1.00s", summary)
        self.assertIn("] 2/2 in 1.00s", summary)
        self.assertIn("Distinct keys: 2", summary)
        self.assertIn("Peak Memory: 50.0 MB", summary)
        self.assertIn("Failed tasks: 1", summary)

    def test_job_summary_without_failures(self):
        metrics = JobMetrics(job_id="ok", start_time=0.0, num_input_items=0)

        self.assertNotIn("Failed tasks", format_job_summary(metrics))


if __name__ == '__main__':
    unittest.main()
