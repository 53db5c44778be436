#!/usr/bin/env python3
"""
Generate plots from benchmark results.
"""

import json
import sys
from collections import defaultdict
from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

# Configuration
PLOTS_DIR = Path("benchmark_results/plots")


def load_results(json_file):
    """Load benchmark results from JSON file."""
    with open(json_file, 'r') as f:
        return json.load(f)


def aggregate_runs(results):
    """
    Aggregate multiple runs of the same benchmark.
    Returns dict: benchmark_name -> {avg_runtime, std_runtime, config, ...}
    """
    by_benchmark = defaultdict(list)

    for r in results:
        if r['success']:  # Only include runs without task failures
            by_benchmark[r['benchmark_name']].append(r)

    aggregated = {}
    for name, runs in by_benchmark.items():
        runtimes = [r['total_runtime_seconds'] for r in runs]
        throughputs = [r['items_per_second'] for r in runs]
        first = runs[0]

        aggregated[name] = {
            'benchmark_name': name,
            'description': first['description'],
            'max_map_tasks': first['max_map_tasks'],
            'max_reduce_tasks': first['max_reduce_tasks'],
            'input_items': first['input_items'],
            'avg_runtime': np.mean(runtimes),
            'std_runtime': np.std(runtimes),
            'min_runtime': np.min(runtimes),
            'max_runtime': np.max(runtimes),
            'avg_throughput': np.mean(throughputs),
            'peak_memory_mb': max(r['peak_memory_mb'] for r in runs),
            'num_runs': len(runs)
        }

    return aggregated


def _save(output_file):
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"✓ Saved: {output_file}")
    plt.close()


def plot_input_size_scaling(aggregated, output_file):
    """Plot runtime vs number of input items."""
    data = [(v['input_items'], v['avg_runtime'], v['std_runtime'])
            for k, v in aggregated.items()
            if k.startswith('input_size_')]

    if not data:
        print("⚠️  No input size scaling data found")
        return

    data.sort()
    sizes, runtimes, stds = zip(*data)

    plt.figure(figsize=(10, 6))
    plt.errorbar(sizes, runtimes, yerr=stds, marker='o', capsize=5,
                 linewidth=2, markersize=8)
    plt.xlabel('Input Items', fontsize=12)
    plt.ylabel('Runtime (seconds)', fontsize=12)
    plt.title('Local MapReduce: Input Size Scaling\n(unbounded fan-out)',
              fontsize=14, fontweight='bold')
    _save(output_file)


def plot_concurrency_scaling(aggregated, prefix, field, label, color, output_file):
    """Plot runtime vs a concurrency cap for one experiment."""
    data = [(v[field], v['avg_runtime'], v['std_runtime'])
            for k, v in aggregated.items()
            if k.startswith(prefix)]

    if not data:
        print(f"⚠️  No {prefix}* data found")
        return

    data.sort()
    limits, runtimes, stds = zip(*data)

    plt.figure(figsize=(10, 6))
    plt.errorbar(limits, runtimes, yerr=stds, marker='s', capsize=5,
                 linewidth=2, markersize=8, color=color)
    plt.xlabel(label, fontsize=12)
    plt.ylabel('Runtime (seconds)', fontsize=12)
    plt.title(f'Local MapReduce: {label}', fontsize=14, fontweight='bold')
    plt.xticks(limits)
    _save(output_file)


def plot_speedup(aggregated, output_file):
    """Plot speedup for map concurrency scaling."""
    data = [(v['max_map_tasks'], v['avg_runtime'])
            for k, v in aggregated.items()
            if k.startswith('map_scaling_')]

    if len(data) < 2:
        print("⚠️  Insufficient data for speedup plot")
        return

    data.sort()
    map_tasks, runtimes = zip(*data)

    baseline = runtimes[0]
    speedups = [baseline / rt for rt in runtimes]

    plt.figure(figsize=(10, 6))
    plt.plot(map_tasks, speedups, marker='o', linewidth=2, markersize=8,
             label='Actual Speedup', color='blue')
    plt.plot(map_tasks, list(map_tasks), linestyle='--', linewidth=2,
             label='Ideal (Linear) Speedup', color='gray', alpha=0.7)
    plt.xlabel('Concurrent Map Tasks', fontsize=12)
    plt.ylabel('Speedup', fontsize=12)
    plt.title('Map Phase Speedup vs Ideal Linear Speedup',
              fontsize=14, fontweight='bold')
    plt.xticks(map_tasks)
    plt.legend(fontsize=11)
    _save(output_file)


def generate_summary_table(aggregated, output_file):
    """Generate a markdown table summarizing all results."""
    lines = [
        "# Benchmark Results Summary\n",
        "| Benchmark | Maps | Reduces | Items | Avg Runtime (s) | Std Dev | Items/s | Peak MB |",
        "|-----------|------|---------|-------|-----------------|---------|---------|---------|"
    ]

    for name in sorted(aggregated.keys()):
        v = aggregated[name]
        lines.append(
            f"| {v['benchmark_name']:<21} | {v['max_map_tasks'] or '-':>4} | "
            f"{v['max_reduce_tasks'] or '-':>7} | {v['input_items']:>5} | "
            f"{v['avg_runtime']:>15.3f} | {v['std_runtime']:>7.3f} | "
            f"{v['avg_throughput']:>7.0f} | {v['peak_memory_mb']:>7.1f} |"
        )

    with open(output_file, 'w') as f:
        f.write('\n'.join(lines))

    print(f"✓ Saved: {output_file}")


def main():
    """Generate all plots from benchmark results."""
    if len(sys.argv) < 2:
        print("Usage: python plot_results.py <results.json>")
        sys.exit(1)

    json_file = sys.argv[1]
    if not Path(json_file).exists():
        print(f"❌ File not found: {json_file}")
        sys.exit(1)

    results = load_results(json_file)
    print(f"✓ Loaded {len(results)} benchmark results")

    aggregated = aggregate_runs(results)
    print(f"✓ Aggregated into {len(aggregated)} unique benchmarks")

    PLOTS_DIR.mkdir(parents=True, exist_ok=True)

    print("\nGenerating plots...")
    plot_input_size_scaling(aggregated, PLOTS_DIR / "1_input_size_scaling.png")
    plot_concurrency_scaling(aggregated, 'map_scaling_', 'max_map_tasks',
                             'Concurrent Map Tasks', 'orangered',
                             PLOTS_DIR / "2_map_concurrency.png")
    plot_concurrency_scaling(aggregated, 'reduce_scaling_', 'max_reduce_tasks',
                             'Concurrent Reduce Tasks', 'green',
                             PLOTS_DIR / "3_reduce_concurrency.png")
    plot_speedup(aggregated, PLOTS_DIR / "4_speedup_analysis.png")
    generate_summary_table(aggregated, PLOTS_DIR / "results_table.md")

    print(f"\nAll plots saved to: {PLOTS_DIR}/")


if __name__ == "__main__":
    main()
