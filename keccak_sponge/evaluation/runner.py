#!/usr/bin/env python3
"""
Command line for keccak_sponge.

Usage:
    keccak-sponge digest [--algorithm NAME] [--length N] [FILE ...]
    keccak-sponge selftest
    keccak-sponge bench [--algorithms A,B] [--sizes S1,S2] [--iterations N] [--no-charts]
    keccak-sponge config [--show] [--set-default-algorithm NAME] [--set-benchmark-sizes S1,S2]

Equivalent to ``python -m keccak_sponge.evaluation.runner``.
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from ..config import ConfigError, SpongeConfig
from ..crypto.hashes import algorithms_available, canonical_name, new
from .experiments import (
    run_correctness_experiments,
    run_known_answer_tests,
    run_performance_experiments
)
from .results import new_run_root, write_summary
from .sysinfo import capture_system_info

CHUNK_SIZE = 64 * 1024


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog='keccak-sponge',
                                     description='SHA-3 / SHAKE sponge toolkit')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')

    # Global options
    parser.add_argument('--config-dir', type=str,
                        help='Configuration directory (default: ~/.keccak_sponge)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    # Digest files
    digest_parser = subparsers.add_parser('digest', help='Print digests of files or stdin')
    digest_parser.add_argument('--algorithm', '-a', type=str,
                               help=f"One of: {', '.join(sorted(algorithms_available))}")
    digest_parser.add_argument('--length', '-l', type=int,
                               help='Output length in bytes (SHAKE only)')
    digest_parser.add_argument('files', nargs='*', help="Files to hash ('-' for stdin)")

    # Known-answer self test
    subparsers.add_parser('selftest', help='Check known-answer vectors')

    # Benchmarks
    bench_parser = subparsers.add_parser('bench', help='Benchmark against the reference implementation')
    bench_parser.add_argument('--algorithms', type=str, default='sha3_256,shake_128',
                              help='Comma-separated algorithms to benchmark')
    bench_parser.add_argument('--sizes', type=str,
                              help='Comma-separated message sizes (default: from config)')
    bench_parser.add_argument('--iterations', type=int, default=50,
                              help='Hashes per measurement (default: 50)')
    bench_parser.add_argument('--trials', type=int, default=10,
                              help='Random cross-check trials per algorithm (default: 10)')
    bench_parser.add_argument('--output-dir', type=str,
                              help='Output directory (default: new timestamped folder under evaluation_results)')
    bench_parser.add_argument('--format', choices=['csv', 'json', 'both'], default='both',
                              help='Output format for data files')
    bench_parser.add_argument('--no-charts', action='store_true', help='Disable chart generation')

    # Configuration
    config_parser = subparsers.add_parser('config', help='Show or change settings')
    config_parser.add_argument('--show', action='store_true', help='Print effective settings')
    config_parser.add_argument('--set-default-algorithm', type=str, metavar='NAME',
                               help='Default algorithm for the digest command')
    config_parser.add_argument('--set-benchmark-sizes', type=str, metavar='SIZES',
                               help='Comma-separated default benchmark sizes')

    return parser


def _parse_int_list(value: str) -> List[int]:
    return [int(x.strip()) for x in value.split(',') if x.strip()]


def _digest_stream(stream, algorithm: str, length: Optional[int]) -> str:
    hasher = new(algorithm)
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        hasher.update(chunk)

    if algorithm.startswith('shake'):
        return hasher.hexdigest(length)
    return hasher.hexdigest()


def cmd_digest(args, config: SpongeConfig) -> int:
    """Print one digest line per input."""
    algorithm = canonical_name(args.algorithm) if args.algorithm else config.get_default_algorithm()

    if args.length is not None and not algorithm.startswith('shake'):
        print(f"--length is only valid for SHAKE algorithms, not {algorithm}", file=sys.stderr)
        return 2

    files = args.files or ['-']
    status = 0
    for name in files:
        if name == '-':
            hex_digest = _digest_stream(sys.stdin.buffer, algorithm, args.length)
        else:
            try:
                with open(name, 'rb') as f:
                    hex_digest = _digest_stream(f, algorithm, args.length)
            except OSError as e:
                print(f"{name}: {e.strerror}", file=sys.stderr)
                status = 1
                continue
        print(f"{hex_digest}  {name}")

    return status


def cmd_selftest(args, config: SpongeConfig) -> int:
    """Run known-answer vectors and report."""
    records = run_known_answer_tests()
    for record in records:
        mark = "PASS" if record['passed'] else "FAIL"
        print(f"[{mark}] {record['label']}")

    failed = [r for r in records if not r['passed']]
    print(f"\n{len(records) - len(failed)}/{len(records)} vectors passed")
    return 1 if failed else 0


def cmd_bench(args, config: SpongeConfig) -> int:
    """Run correctness and throughput experiments and write a report."""
    algorithms = [canonical_name(x) for x in args.algorithms.split(',') if x.strip()]
    sizes = _parse_int_list(args.sizes) if args.sizes else config.get_benchmark_sizes()

    if args.output_dir:
        output_root = Path(args.output_dir)
        output_root.mkdir(parents=True, exist_ok=True)
    else:
        output_root = new_run_root(Path("evaluation_results"))

    print("keccak_sponge Evaluation Suite")
    print(f"Output directory: {output_root}")
    print()

    sysinfo = capture_system_info()

    print("Running correctness evaluation...")
    correctness = run_correctness_experiments(
        output_root=output_root / 'correctness',
        trials=args.trials,
        format=args.format
    )

    print("Running performance evaluation...")
    performance = run_performance_experiments(
        output_root=output_root / 'performance',
        algorithms=algorithms,
        message_sizes=sizes,
        iterations=args.iterations,
        format=args.format,
        generate_charts=not args.no_charts
    )

    summary_data = {
        'command': 'bench',
        'system_info': sysinfo,
        'results_summary': {
            'success_rate': correctness['success_rate'],
            'throughput': performance['throughput']
        },
        'output_directory': str(output_root)
    }
    write_summary(output_root, "bench", summary_data)

    print("\nEvaluation complete!")
    print(f"Results saved to: {output_root}")
    print(f"Summary: {output_root}/SUMMARY.md")

    return 0 if correctness['success_rate'] == 1.0 else 1


def cmd_config(args, config: SpongeConfig) -> int:
    """Show or update settings."""
    changed = False
    if args.set_default_algorithm:
        config.set_default_algorithm(args.set_default_algorithm)
        changed = True
    if args.set_benchmark_sizes:
        config.set_benchmark_sizes(_parse_int_list(args.set_benchmark_sizes))
        changed = True

    if args.show or not changed:
        for key, value in config.as_dict().items():
            print(f"{key}: {value}")
    return 0


COMMANDS = {
    'digest': cmd_digest,
    'selftest': cmd_selftest,
    'bench': cmd_bench,
    'config': cmd_config,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = SpongeConfig(args.config_dir)
        return COMMANDS[args.command](args, config)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"\nCommand failed: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
