"""Formatting helpers for reporting engine runs."""

from mapreduce_engine.metrics import JobMetrics


def format_duration(seconds: float) -> str:
    """Format a phase or run duration; in-process runs are mostly sub-second."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, seconds = divmod(seconds, 60)
    return f"{int(minutes)}m {seconds:.1f}s"


def format_progress_bar(completed: int, total: int, width: int = 30) -> str:
    """Bar of successful tasks out of launched ones, with the raw counts."""
    ratio = (completed / total) if total > 0 else 0
    filled = int(width * ratio)
    return f"[{'#' * filled}{'.' * (width - filled)}] {completed}/{total}"


def format_job_summary(metrics: JobMetrics) -> str:
    """Multi-line summary of a finished run."""
    map_ok = metrics.map_tasks_launched - metrics.map_tasks_failed
    reduce_ok = metrics.reduce_tasks_launched - metrics.reduce_tasks_failed
    lines = [
        f"Job ID: {metrics.job_id}",
        f"Runtime: {format_duration(metrics.total_time_seconds)}",
        f"Map:    {format_progress_bar(map_ok, metrics.map_tasks_launched)} "
        f"in {format_duration(metrics.map_phase_time_seconds)}",
        f"Reduce: {format_progress_bar(reduce_ok, metrics.reduce_tasks_launched)} "
        f"in {format_duration(metrics.reduce_phase_time_seconds)}",
        f"Distinct keys: {metrics.num_keys}",
        f"Peak Memory: {metrics.peak_memory_bytes / (1024 * 1024):.1f} MB",
    ]
    if metrics.failed_tasks:
        lines.append(f"Failed tasks: {metrics.failed_tasks}")
    return "\n".join(lines)
