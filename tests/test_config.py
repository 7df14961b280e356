"""
Tests for the settings file handling.
"""

import json

import pytest

from keccak_sponge.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_BENCHMARK_SIZES,
    ConfigError,
    SpongeConfig,
)


class TestSpongeConfig:
    """Test SpongeConfig."""

    def test_creates_directory(self, tmp_path):
        config_dir = tmp_path / "nested" / "config"
        config = SpongeConfig(str(config_dir))
        assert config_dir.is_dir()
        assert not config.settings_exist()

    def test_defaults(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        assert config.get_default_algorithm() == DEFAULT_ALGORITHM
        assert config.get_benchmark_sizes() == DEFAULT_BENCHMARK_SIZES

    def test_set_default_algorithm_normalizes(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        config.set_default_algorithm("SHAKE-128")
        assert config.settings_exist()
        assert config.get_default_algorithm() == "shake_128"

    def test_settings_persist(self, tmp_path):
        SpongeConfig(str(tmp_path)).set_default_algorithm("sha3_512")
        assert SpongeConfig(str(tmp_path)).get_default_algorithm() == "sha3_512"

    def test_unknown_algorithm_rejected(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        with pytest.raises(ConfigError):
            config.set_default_algorithm("md5")
        assert not config.settings_exist()

    def test_benchmark_sizes(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        config.set_benchmark_sizes([32, 4096])
        assert config.get_benchmark_sizes() == [32, 4096]

    @pytest.mark.parametrize("sizes", [[], [0], [-5], [1.5], [True]])
    def test_invalid_benchmark_sizes(self, tmp_path, sizes):
        config = SpongeConfig(str(tmp_path))
        with pytest.raises(ConfigError):
            config.set_benchmark_sizes(sizes)

    def test_settings_keep_other_keys(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        config.set_benchmark_sizes([10])
        config.set_default_algorithm("sha3_224")

        with open(config.settings_path) as f:
            stored = json.load(f)
        assert stored == {"benchmark_sizes": [10], "default_algorithm": "sha3_224"}

    def test_corrupt_settings(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        with open(config.settings_path, "w") as f:
            f.write("{not json")
        with pytest.raises(ConfigError):
            config.get_default_algorithm()

    def test_non_object_settings(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        with open(config.settings_path, "w") as f:
            json.dump([1, 2, 3], f)
        with pytest.raises(ConfigError):
            config.get_benchmark_sizes()

    def test_invalid_stored_algorithm(self, tmp_path):
        config = SpongeConfig(str(tmp_path))
        with open(config.settings_path, "w") as f:
            json.dump({"default_algorithm": "whirlpool"}, f)
        with pytest.raises(ConfigError):
            config.get_default_algorithm()

    def test_as_dict(self, tmp_path):
        settings = SpongeConfig(str(tmp_path)).as_dict()
        assert settings["default_algorithm"] == DEFAULT_ALGORITHM
        assert "shake_256" in settings["algorithms_available"]
