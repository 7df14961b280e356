"""
Results handling for keccak_sponge evaluation runs.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from .sysinfo import get_timestamp


def new_run_root(outdir: Path) -> Path:
    """Create a new timestamped results directory."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    run_root = Path(outdir) / timestamp
    run_root.mkdir(parents=True, exist_ok=True)
    return run_root


def write_data(output_root: Path, filename: str, data: Any, format: str = 'both') -> List[Path]:
    """
    Write data to files in the specified format(s).

    Args:
        output_root: Directory to write files
        filename: Base filename (without extension)
        data: Data to write
        format: 'csv', 'json', or 'both'

    Returns:
        List of written file paths
    """
    output_root = Path(output_root)
    output_root.mkdir(parents=True, exist_ok=True)
    written_files = []

    if format in ['csv', 'both']:
        csv_path = output_root / f"{filename}.csv"
        rows = None
        if isinstance(data, list) and data and all(isinstance(row, dict) for row in data):
            rows = data
        elif isinstance(data, dict) and all(isinstance(v, (int, float, str, bool)) for v in data.values()):
            rows = [data]

        # Only flat records are written as CSV
        if rows is not None:
            with open(csv_path, 'w', newline='') as f:
                writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
                writer.writeheader()
                writer.writerows(rows)
            written_files.append(csv_path)

    if format in ['json', 'both'] or not written_files:
        json_path = output_root / f"{filename}.json"
        with open(json_path, 'w') as f:
            json.dump(data, f, indent=2, default=str)  # default=str for datetime objects
        written_files.append(json_path)

    return written_files


def write_summary(output_root: Path, experiment_name: str, summary_data: Dict[str, Any]) -> Path:
    """Write experiment summary as markdown file."""
    output_root = Path(output_root)
    summary_path = output_root / "SUMMARY.md"

    with open(summary_path, 'w') as f:
        f.write(f"# keccak_sponge Evaluation Results: {experiment_name}\n\n")
        f.write(f"**Generated:** {get_timestamp()}\n")
        f.write(f"**Output Directory:** `{output_root}`\n\n")

        # System information
        if 'system_info' in summary_data:
            f.write("## System Information\n\n")
            sysinfo = summary_data['system_info']
            f.write(f"- **Platform:** {sysinfo.get('system', {}).get('platform', 'Unknown')}\n")
            f.write(f"- **Byte order:** {sysinfo.get('system', {}).get('byteorder', 'Unknown')}\n")
            f.write(f"- **Python:** {sysinfo.get('python', {}).get('version', 'Unknown')}\n")
            if 'hardware' in sysinfo and 'cpu' in sysinfo['hardware']:
                cpu = sysinfo['hardware']['cpu']
                f.write(f"- **CPU Cores:** {cpu.get('logical_cores', 'Unknown')}\n")
                f.write(f"- **Memory:** {sysinfo['hardware'].get('memory', {}).get('total_gb', 'Unknown')} GB\n")
            f.write("\n")

        # Results summary
        if 'results_summary' in summary_data:
            f.write("## Results Summary\n\n")
            results = summary_data['results_summary']

            if 'success_rate' in results:
                f.write(f"- **Success Rate:** {results['success_rate']*100:.1f}%\n")

            if 'throughput' in results:
                f.write("- **Throughput Results:**\n")
                for algorithm, by_size in results['throughput'].items():
                    for size, data in by_size.items():
                        ratio = data.get('ratio')
                        ratio_text = f" ({ratio:.3f}x reference)" if ratio else ""
                        rss = data.get('rss_delta_mb')
                        rss_text = f", RSS delta {rss:+.2f} MB" if rss is not None else ""
                        f.write(f"  - {algorithm} {size} bytes: "
                                f"{data['keccak_sponge']:.3f} MB/s{ratio_text}{rss_text}\n")

        f.write("\n## Files Generated\n\n")

        # List generated files
        for file_path in sorted(output_root.glob("**/*")):
            if file_path.is_file() and file_path.name != "SUMMARY.md":
                relative_path = file_path.relative_to(output_root)
                f.write(f"- `{relative_path}`\n")

    return summary_path
