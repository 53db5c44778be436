#!/usr/bin/env python3
"""
Automated benchmarking script for the local MapReduce engine.
Runs the engine in-process over several configurations and collects metrics.
"""

import csv
import json
import sys
import time
import logging
from datetime import datetime
from pathlib import Path

from mapreduce_engine.config import EngineConfig
from mapreduce_engine.engine import Engine
from mapreduce_engine.errors import ItemError
from mapreduce_engine.input_reader import read_tokens

# Configuration
RESULTS_DIR = Path("benchmark_results")
INPUT_DIR = Path("shared") / "input"

# Benchmark configurations; None means unbounded fan-out
BENCHMARKS = [
    # Experiment 1: Input Size Scaling (unbounded)
    {"name": "input_size_small", "input": "numbers_small.txt", "maps": None, "reduces": None,
     "buckets": 100, "description": "Small input (1k items), baseline"},
    {"name": "input_size_medium", "input": "numbers_medium.txt", "maps": None, "reduces": None,
     "buckets": 100, "description": "Medium input (10k items)"},
    {"name": "input_size_large", "input": "numbers_large.txt", "maps": None, "reduces": None,
     "buckets": 100, "description": "Large input (50k items)"},

    # Experiment 2: Map Concurrency Scaling (fixed input)
    {"name": "map_scaling_1", "input": "numbers_medium.txt", "maps": 1, "reduces": 4,
     "buckets": 100, "description": "1 concurrent map task"},
    {"name": "map_scaling_2", "input": "numbers_medium.txt", "maps": 2, "reduces": 4,
     "buckets": 100, "description": "2 concurrent map tasks"},
    {"name": "map_scaling_4", "input": "numbers_medium.txt", "maps": 4, "reduces": 4,
     "buckets": 100, "description": "4 concurrent map tasks"},
    {"name": "map_scaling_8", "input": "numbers_medium.txt", "maps": 8, "reduces": 4,
     "buckets": 100, "description": "8 concurrent map tasks"},

    # Experiment 3: Reduce Concurrency Scaling (many keys)
    {"name": "reduce_scaling_1", "input": "numbers_medium.txt", "maps": 8, "reduces": 1,
     "buckets": 2000, "description": "1 concurrent reduce task"},
    {"name": "reduce_scaling_2", "input": "numbers_medium.txt", "maps": 8, "reduces": 2,
     "buckets": 2000, "description": "2 concurrent reduce tasks"},
    {"name": "reduce_scaling_4", "input": "numbers_medium.txt", "maps": 8, "reduces": 4,
     "buckets": 2000, "description": "4 concurrent reduce tasks"},
    {"name": "reduce_scaling_8", "input": "numbers_medium.txt", "maps": 8, "reduces": 8,
     "buckets": 2000, "description": "8 concurrent reduce tasks"},
]


def make_job(buckets: int):
    """Map integers into `buckets` keys and sum each bucket."""
    def map_fn(token):
        try:
            value = int(token)
        except ValueError:
            return ItemError(f"not an integer: {token!r}", item=token)
        return (value % buckets, value)

    def reduce_fn(key, values):
        sum(values)

    return map_fn, reduce_fn


def check_prerequisites():
    """Verify benchmark inputs exist."""
    missing = [c["input"] for c in BENCHMARKS if not (INPUT_DIR / c["input"]).exists()]
    if missing:
        for name in sorted(set(missing)):
            print(f"❌ Missing input file: {INPUT_DIR / name}")
        print("   Run scripts/generate_benchmark_inputs.py first.")
        sys.exit(1)
    print("✓ All benchmark inputs found")


def run_benchmark(config, run_number=1):
    """Run a single benchmark configuration."""
    print(f"\n{'='*70}")
    print(f"Benchmark: {config['name']} (Run {run_number})")
    print(f"Description: {config['description']}")
    print(f"Config: maps={config['maps'] or 'unbounded'}, reduces={config['reduces'] or 'unbounded'}")
    print(f"{'='*70}")

    input_path = INPUT_DIR / config["input"]
    input_size = input_path.stat().st_size
    items = read_tokens(str(input_path))

    engine = Engine(items, EngineConfig(
        max_concurrent_map_tasks=config["maps"],
        max_concurrent_reduce_tasks=config["reduces"],
    ))
    map_fn, reduce_fn = make_job(config["buckets"])

    start_time = time.time()
    engine.run(map_fn, reduce_fn)
    duration = time.time() - start_time
    metrics = engine.metrics
    print(f"  ✓ Completed in {duration:.2f}s ({metrics.failed_tasks} failed tasks)")

    return {
        "benchmark_name": config["name"],
        "description": config["description"],
        "run_number": run_number,
        "timestamp": datetime.now().isoformat(),
        "job_id": metrics.job_id,
        "input_file": config["input"],
        "input_items": len(items),
        "input_size_bytes": input_size,
        "input_size_mb": round(input_size / 1024 / 1024, 3),
        "max_map_tasks": config["maps"] or 0,
        "max_reduce_tasks": config["reduces"] or 0,
        "num_keys": metrics.num_keys,
        "success": metrics.failed_tasks == 0,
        "total_runtime_seconds": round(duration, 4),
        "map_phase_seconds": round(metrics.map_phase_time_seconds, 4),
        "reduce_phase_seconds": round(metrics.reduce_phase_time_seconds, 4),
        "items_per_second": round(len(items) / duration, 1) if duration > 0 else 0,
        "peak_memory_mb": round(metrics.peak_memory_bytes / 1024 / 1024, 1),
    }


def save_results(results, timestamp):
    """Save results to JSON and CSV files."""
    json_file = RESULTS_DIR / f"benchmark_results_{timestamp}.json"
    with open(json_file, 'w') as f:
        json.dump(results, f, indent=2)
    print(f"\n✓ Results saved to: {json_file}")

    csv_file = RESULTS_DIR / f"benchmark_results_{timestamp}.csv"
    if results:
        fieldnames = list(results[0].keys())
        with open(csv_file, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(results)
        print(f"✓ Results saved to: {csv_file}")

    return json_file, csv_file


def print_summary(results):
    """Print a summary table of results."""
    print(f"\n{'='*70}")
    print("BENCHMARK SUMMARY")
    print(f"{'='*70}")
    print(f"{'Benchmark':<25} {'Maps':>5} {'Reduces':>7} {'Runtime':>10} {'Status':>10}")
    print(f"{'-'*70}")

    for r in results:
        print(f"{r['benchmark_name']:<25} {r['max_map_tasks'] or '-':>5} "
              f"{r['max_reduce_tasks'] or '-':>7} {r['total_runtime_seconds']:>9.2f}s "
              f"{'✓' if r['success'] else '✗':>10}")

    print(f"{'='*70}")

    successful = sum(1 for r in results if r['success'])
    print(f"Total: {len(results)} benchmarks, {successful} successful, "
          f"{len(results) - successful} with task failures")


def main():
    """Main benchmarking workflow."""
    print("=" * 70)
    print("Local MapReduce Performance Benchmark Suite")
    print("=" * 70)

    logging.basicConfig(level=logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    RESULTS_DIR.mkdir(exist_ok=True)
    check_prerequisites()

    runs_per_benchmark = 1
    if "--runs" in sys.argv:
        runs_per_benchmark = max(1, min(5, int(sys.argv[sys.argv.index("--runs") + 1])))

    print(f"\nRunning {len(BENCHMARKS)} benchmarks × {runs_per_benchmark} runs")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    all_results = []
    for config in BENCHMARKS:
        for run in range(1, runs_per_benchmark + 1):
            all_results.append(run_benchmark(config, run_number=run))

    json_file, _ = save_results(all_results, timestamp)
    print_summary(all_results)

    print(f"\n{'='*70}")
    print("Next steps:")
    print(f"  1. Review results: cat {json_file}")
    print(f"  2. Generate plots: python plot_results.py {json_file}")
    print(f"{'='*70}")


if __name__ == "__main__":
    main()
