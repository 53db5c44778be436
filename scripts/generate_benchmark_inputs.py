#!/usr/bin/env python3
"""
Generate benchmark input files of whitespace-separated integers.
"""

import random
from pathlib import Path

# Configuration
INPUT_DIR = Path("shared") / "input"
SEED = 42

# Target token counts
TARGETS = [
    ("numbers_small.txt", 1_000),
    ("numbers_medium.txt", 10_000),
    ("numbers_large.txt", 50_000),
]


def generate_file(output_path: Path, num_tokens: int, seed: int = SEED, per_line: int = 20) -> int:
    """
    Write num_tokens random integers to output_path.

    Args:
        output_path: Path where the output file should be written
        num_tokens: How many integers to write
        seed: Random seed so reruns produce identical files
        per_line: Integers per line

    Returns:
        Size of the written file in bytes
    """
    print(f"Generating {output_path.name} ({num_tokens} integers)...")
    rng = random.Random(seed)

    with open(output_path, 'w') as f:
        for start in range(0, num_tokens, per_line):
            count = min(per_line, num_tokens - start)
            f.write(" ".join(str(rng.randint(0, 1_000_000)) for _ in range(count)))
            f.write("\n")

    actual_size = output_path.stat().st_size
    print(f"  ✓ Created: {output_path.name} ({actual_size / 1024:.1f} KB)")
    return actual_size


def main():
    """Generate all benchmark input files."""
    print("=" * 70)
    print("Generating Benchmark Input Files")
    print("=" * 70)

    INPUT_DIR.mkdir(parents=True, exist_ok=True)

    total_size = 0
    for filename, num_tokens in TARGETS:
        output_path = INPUT_DIR / filename
        if output_path.exists():
            print(f"  ⏭️  Skipping {filename} (already exists)")
            total_size += output_path.stat().st_size
            continue
        total_size += generate_file(output_path, num_tokens)

    print("\n" + "=" * 70)
    print(f"✓ Generation complete!")
    print(f"  Total size: {total_size / (1024*1024):.2f} MB")
    print(f"  Files created in: {INPUT_DIR}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    exit(main())
