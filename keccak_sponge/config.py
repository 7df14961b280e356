"""
Configuration management for keccak_sponge.

Stores command-line defaults (default digest algorithm, benchmark message
sizes) in a JSON settings file under a configuration directory. The hashing
core itself takes no configuration.
"""

import json
import logging
import os
from typing import Any, Dict, List

from .crypto.hashes import algorithms_available, canonical_name

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "sha3_256"
DEFAULT_BENCHMARK_SIZES = [64, 1024, 16384]


class ConfigError(Exception):
    """Raised when configuration operations fail."""
    pass


class SpongeConfig:
    """
    Simple configuration manager for keccak_sponge.

    Settings live in ``<config_dir>/settings.json``; missing keys fall back
    to the package defaults.
    """

    def __init__(self, config_dir: str = None):
        """
        Initialize configuration.

        Args:
            config_dir: Directory for configuration files. Defaults to ~/.keccak_sponge/
        """
        if config_dir is None:
            config_dir = os.path.expanduser("~/.keccak_sponge")

        self.config_dir = config_dir
        self.settings_path = os.path.join(config_dir, "settings.json")

        try:
            os.makedirs(config_dir, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory {config_dir}: {e}")

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.settings_path):
            return {}

        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                settings = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid settings file {self.settings_path}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read settings: {e}")

        if not isinstance(settings, dict):
            raise ConfigError(f"Invalid settings file {self.settings_path}: expected a JSON object")
        return settings

    def _save(self, settings: Dict[str, Any]) -> None:
        try:
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2, sort_keys=True)
        except OSError as e:
            raise ConfigError(f"Failed to save settings: {e}")
        logger.info(f"Settings saved to: {self.settings_path}")

    def get_default_algorithm(self) -> str:
        """
        Get the default digest algorithm for the command line.

        Returns:
            Canonical algorithm name

        Raises:
            ConfigError: If the stored name is not a supported algorithm
        """
        name = self._load().get("default_algorithm", DEFAULT_ALGORITHM)
        try:
            return canonical_name(name)
        except (ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid default algorithm in settings: {e}")

    def set_default_algorithm(self, name: str) -> None:
        """
        Set the default digest algorithm.

        Args:
            name: Algorithm name (any accepted spelling)

        Raises:
            ConfigError: If the algorithm is not supported
        """
        try:
            canonical = canonical_name(name)
        except ValueError as e:
            raise ConfigError(str(e))

        settings = self._load()
        settings["default_algorithm"] = canonical
        self._save(settings)

    def get_benchmark_sizes(self) -> List[int]:
        """Get the message sizes used by the benchmark command."""
        sizes = self._load().get("benchmark_sizes", DEFAULT_BENCHMARK_SIZES)
        if not isinstance(sizes, list) or not all(
            isinstance(s, int) and not isinstance(s, bool) and s > 0 for s in sizes
        ):
            raise ConfigError("Invalid benchmark_sizes in settings: expected positive integers")
        return list(sizes)

    def set_benchmark_sizes(self, sizes: List[int]) -> None:
        """
        Set the benchmark message sizes.

        Raises:
            ConfigError: If any size is not a positive integer
        """
        if not sizes or not all(isinstance(s, int) and not isinstance(s, bool) and s > 0 for s in sizes):
            raise ConfigError("Benchmark sizes must be a non-empty list of positive integers")

        settings = self._load()
        settings["benchmark_sizes"] = list(sizes)
        self._save(settings)

    def settings_exist(self) -> bool:
        """Check if a settings file exists."""
        return os.path.exists(self.settings_path)

    def as_dict(self) -> Dict[str, Any]:
        """Return the effective settings, defaults included."""
        return {
            "config_dir": self.config_dir,
            "default_algorithm": self.get_default_algorithm(),
            "benchmark_sizes": self.get_benchmark_sizes(),
            "algorithms_available": sorted(algorithms_available),
        }
