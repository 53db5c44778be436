#!/usr/bin/env python3
"""
Local MapReduce CLI
Runs a job file's map_fn/reduce_fn over the tokens of an input file
"""

import argparse
import logging
import sys

from mapreduce_engine.config import EngineConfig
from mapreduce_engine.engine import Engine
from mapreduce_engine.errors import ConfigError, JobFileError
from mapreduce_engine.function_loader import FunctionLoader
from mapreduce_engine.input_reader import read_tokens
from mapreduce_engine.monitoring import format_job_summary

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def run_job(args):
    """Load the job file and input, then run the engine"""
    try:
        config = EngineConfig.from_env().with_overrides(
            max_concurrent_map_tasks=args.max_map,
            max_concurrent_reduce_tasks=args.max_reduce,
        )
        loader = FunctionLoader(args.job_file)
        map_fn = loader.get_map_function()
        reduce_fn = loader.get_reduce_function()
        items = read_tokens(args.input)
    except (ConfigError, JobFileError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = Engine(items, config)
    engine.run(map_fn, reduce_fn)

    metrics = engine.metrics
    if args.metrics_out:
        metrics.save_to_file(args.metrics_out)
    if args.stats:
        print(format_job_summary(metrics), file=sys.stderr)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mapreduce-local',
        description='In-process parallel MapReduce',
        epilog='Example: %(prog)s run --input input.txt --job-file examples/parity_sum.py'
    )
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level for diagnostics on stderr (default: WARNING)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    run_parser = subparsers.add_parser(
        'run',
        help='Run a job over an input file',
        description='Split the input file on whitespace and run map_fn/reduce_fn over the tokens'
    )
    run_parser.add_argument('--input', required=True, help='Input text file')
    run_parser.add_argument('--job-file', required=True, help='Python file defining map_fn and reduce_fn')
    run_parser.add_argument('--max-map', type=int, help='Cap on concurrent map tasks (default: unbounded)')
    run_parser.add_argument('--max-reduce', type=int, help='Cap on concurrent reduce tasks (default: unbounded)')
    run_parser.add_argument('--metrics-out', help='Write run metrics as JSON to this file')
    run_parser.add_argument('--stats', action='store_true', help='Print a run summary to stderr')
    run_parser.set_defaults(func=run_job)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    # If no command specified, print help
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
