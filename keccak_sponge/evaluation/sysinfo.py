"""
System information capture for reproducible benchmark results.
"""

import platform
import sys
from datetime import datetime
from typing import Any, Dict

import psutil


def capture_system_info() -> Dict[str, Any]:
    """Capture system information for benchmark reproducibility."""
    sysinfo = {
        "timestamp": get_timestamp(),
        "system": get_system_info(),
        "python": get_python_info(),
        "hardware": get_hardware_info(),
        "libraries": get_library_versions()
    }
    return sysinfo


def get_timestamp() -> str:
    """Get current timestamp."""
    return datetime.now().isoformat()


def get_system_info() -> Dict[str, Any]:
    """Get operating system information."""
    return {
        "platform": platform.platform(),
        "system": platform.system(),
        "release": platform.release(),
        "machine": platform.machine(),
        "processor": platform.processor(),
        "byteorder": sys.byteorder
    }


def get_python_info() -> Dict[str, Any]:
    """Get Python interpreter information."""
    return {
        "version": sys.version,
        "version_info": {
            "major": sys.version_info.major,
            "minor": sys.version_info.minor,
            "micro": sys.version_info.micro
        },
        "executable": sys.executable,
        "implementation": platform.python_implementation()
    }


def get_hardware_info() -> Dict[str, Any]:
    """Get CPU and memory information."""
    cpu_freq = psutil.cpu_freq()
    memory = psutil.virtual_memory()

    hardware = {
        "cpu": {
            "physical_cores": psutil.cpu_count(logical=False),
            "logical_cores": psutil.cpu_count(logical=True),
            "max_frequency_mhz": cpu_freq.max if cpu_freq else None,
            "current_frequency_mhz": cpu_freq.current if cpu_freq else None
        },
        "memory": {
            "total_gb": round(memory.total / (1024**3), 2),
            "available_gb": round(memory.available / (1024**3), 2),
            "used_percent": memory.percent
        }
    }

    # CPU model from /proc/cpuinfo on Linux
    try:
        with open('/proc/cpuinfo', 'r') as f:
            for line in f:
                if 'model name' in line:
                    hardware["cpu_model"] = line.split(':')[1].strip()
                    break
    except (FileNotFoundError, PermissionError):
        # Not Linux or no access
        pass

    return hardware


def get_library_versions() -> Dict[str, Any]:
    """Get versions of the libraries used for benchmarking."""
    import cryptography
    import matplotlib
    import numpy

    from .. import __version__

    return {
        "keccak_sponge": __version__,
        "cryptography": cryptography.__version__,
        "psutil": psutil.__version__,
        "matplotlib": matplotlib.__version__,
        "numpy": numpy.__version__,
    }
