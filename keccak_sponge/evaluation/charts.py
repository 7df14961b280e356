"""
Chart generation for keccak_sponge benchmark results.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np

logger = logging.getLogger(__name__)


def generate_performance_charts(output_root: Path, throughput: Dict[str, Any]) -> List[Path]:
    """
    Generate one throughput chart per algorithm.

    Args:
        output_root: Run directory; charts go to ``output_root/charts``
        throughput: {algorithm: {size: {'keccak_sponge': MB/s, 'cryptography': MB/s}}}

    Returns:
        Paths of the written PNG files
    """
    charts_dir = Path(output_root) / 'charts'
    charts_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for algorithm, by_size in throughput.items():
        written.append(generate_throughput_chart(charts_dir, algorithm, by_size))

    logger.info(f"Charts saved to: {charts_dir}")
    return written


def generate_throughput_chart(charts_dir: Path, algorithm: str,
                              by_size: Dict[Any, Dict[str, float]]) -> Path:
    """Generate a package-vs-reference throughput bar chart."""
    sizes = list(by_size.keys())
    ours = [by_size[size].get('keccak_sponge', 0.0) for size in sizes]
    reference = [by_size[size].get('cryptography', 0.0) for size in sizes]

    x = np.arange(len(sizes))
    width = 0.35

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.bar(x - width / 2, ours, width,
           label='keccak_sponge', alpha=0.8, color='#2E86AB')
    ax.bar(x + width / 2, reference, width,
           label='cryptography (reference)', alpha=0.8, color='#A23B72')

    ax.set_xlabel('Message Size (bytes)')
    ax.set_ylabel('Throughput (MB/s)')
    ax.set_title(f'{algorithm} Throughput by Message Size')
    ax.set_xticks(x)
    ax.set_xticklabels([str(size) for size in sizes])
    ax.set_yscale('log')
    ax.legend()
    ax.grid(True, alpha=0.3)

    chart_path = Path(charts_dir) / f"throughput_{algorithm}.png"
    fig.tight_layout()
    fig.savefig(chart_path, dpi=150)
    plt.close(fig)

    return chart_path
