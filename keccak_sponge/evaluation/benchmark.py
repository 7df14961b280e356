"""
Benchmark module for performance evaluation of keccak_sponge.

Measures hashing throughput of this package against the reference SHA-3 /
SHAKE implementation shipped with the ``cryptography`` library, together
with process memory deltas.
"""

import gc
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import psutil
from cryptography.hazmat.primitives import hashes

from ..crypto.hashes import canonical_name, new

logger = logging.getLogger(__name__)

IMPLEMENTATION = "keccak_sponge"
REFERENCE = "cryptography"

_REFERENCE_FIXED = {
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
}

_REFERENCE_XOF = {
    "shake_128": (hashes.SHAKE128, 16),
    "shake_256": (hashes.SHAKE256, 32),
}


def reference_digest(name: str, data: bytes, length: Optional[int] = None) -> bytes:
    """
    Compute a digest with the ``cryptography`` reference implementation.

    Args:
        name: Algorithm name
        data: Input bytes
        length: Output length for SHAKE (defaults to its standard size)

    Returns:
        Digest bytes
    """
    name = canonical_name(name)
    if name in _REFERENCE_FIXED:
        algorithm = _REFERENCE_FIXED[name]()
    else:
        algorithm_cls, default_length = _REFERENCE_XOF[name]
        if length is None:
            length = default_length
        if length == 0:
            return b""
        algorithm = algorithm_cls(digest_size=length)

    hasher = hashes.Hash(algorithm)
    hasher.update(data)
    return hasher.finalize()


def package_digest(name: str, data: bytes) -> bytes:
    """Compute a digest with this package's sponge."""
    return bytes(new(name, data).digest())


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""
    name: str
    implementation: str
    algorithm: str
    message_size: int
    iterations: int
    total_time: float
    avg_time: float
    throughput_mbps: float
    rss_delta_mb: float = 0.0
    vms_delta_mb: float = 0.0


class PerformanceBenchmark:
    """
    Throughput benchmarking for SHA-3 and SHAKE.
    """

    def __init__(self):
        """Initialize benchmark suite."""
        self.results: List[BenchmarkResult] = []

    def measure_memory_usage(self) -> Dict[str, float]:
        """
        Measure current memory usage.

        Returns:
            Dictionary with memory statistics in MB
        """
        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            'rss': memory_info.rss / 1024 / 1024,  # MB
            'vms': memory_info.vms / 1024 / 1024,  # MB
            'percent': process.memory_percent()
        }

    def _time_function(self, func: Callable[[bytes], bytes], data: bytes,
                       iterations: int) -> float:
        start = time.perf_counter()
        for _ in range(iterations):
            func(data)
        return time.perf_counter() - start

    def benchmark_algorithm(self, algorithm: str, message_sizes: List[int],
                            iterations: int = 100,
                            implementation: str = IMPLEMENTATION) -> List[BenchmarkResult]:
        """
        Benchmark one algorithm across message sizes.

        Args:
            algorithm: Algorithm name, e.g. "sha3_256"
            message_sizes: List of message sizes to hash
            iterations: Number of hashes per size
            implementation: IMPLEMENTATION or REFERENCE

        Returns:
            List of benchmark results
        """
        if iterations <= 0:
            raise ValueError("Iterations must be positive")

        algorithm = canonical_name(algorithm)
        if implementation == IMPLEMENTATION:
            func = lambda data: package_digest(algorithm, data)
        elif implementation == REFERENCE:
            func = lambda data: reference_digest(algorithm, data)
        else:
            raise ValueError(f"Unknown implementation: {implementation}")

        results = []
        for size in message_sizes:
            data = os.urandom(size)

            # Force garbage collection before benchmark
            gc.collect()
            memory_before = self.measure_memory_usage()

            total_time = self._time_function(func, data, iterations)

            memory_after = self.measure_memory_usage()

            avg_time = total_time / iterations
            throughput = (size * iterations) / (1024 * 1024) / total_time if total_time > 0 else 0.0

            result = BenchmarkResult(
                name=f"{implementation}-{algorithm}-{size}B",
                implementation=implementation,
                algorithm=algorithm,
                message_size=size,
                iterations=iterations,
                total_time=total_time,
                avg_time=avg_time,
                throughput_mbps=throughput,
                rss_delta_mb=memory_after['rss'] - memory_before['rss'],
                vms_delta_mb=memory_after['vms'] - memory_before['vms']
            )
            logger.info(f"{result.name}: {throughput:.3f} MB/s ({avg_time * 1e6:.1f} us/hash)")

            results.append(result)
            self.results.append(result)

        return results

    def compare_implementations(self, algorithm: str, message_sizes: List[int],
                                iterations: int = 100) -> Dict[str, Any]:
        """
        Compare this package against the reference implementation.

        Returns:
            Dictionary with results for each implementation and the
            per-size throughput ratio (package / reference)
        """
        ours = self.benchmark_algorithm(algorithm, message_sizes, iterations, IMPLEMENTATION)
        reference = self.benchmark_algorithm(algorithm, message_sizes, iterations, REFERENCE)

        ratios = {}
        for mine, ref in zip(ours, reference):
            ratios[mine.message_size] = (
                mine.throughput_mbps / ref.throughput_mbps if ref.throughput_mbps else None
            )

        return {
            'algorithm': canonical_name(algorithm),
            IMPLEMENTATION: ours,
            REFERENCE: reference,
            'throughput_ratio': ratios
        }
