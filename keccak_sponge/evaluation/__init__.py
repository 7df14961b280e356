"""
Evaluation and benchmarking tools for keccak_sponge.
"""

from .benchmark import PerformanceBenchmark, BenchmarkResult, reference_digest
from .results import new_run_root, write_data, write_summary
from .sysinfo import capture_system_info
from .experiments import (
    KNOWN_ANSWER_VECTORS,
    run_known_answer_tests,
    run_correctness_experiments,
    run_performance_experiments
)
