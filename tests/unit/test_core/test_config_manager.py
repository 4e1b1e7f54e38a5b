"""
Unit tests for ConfigManager.

Covers hierarchical YAML loading, environment overrides, validation and
saving of the recognizer configuration.
"""

import pytest
import yaml

from chronotext.core.config_manager import ConfigManager, RecognizerConfig, ResolutionConfig
from chronotext.core.error_handler import ConfigurationError

from tests.fixtures.sample_data import SAMPLE_CONFIGURATIONS


class TestRecognizerConfig:
    """Test suite for the configuration models"""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration values"""
        config = RecognizerConfig()

        assert config.culture == "en-us"
        assert config.resolution == ResolutionConfig()
        assert config.resolution.min_two_digit_year_past_num == 40
        assert config.resolution.inclusive_end_period is False
        assert config.logging.level == "INFO"
        assert config.cache.enabled is True

    @pytest.mark.unit
    def test_culture_is_normalized(self):
        """Test culture names are trimmed and lower cased"""
        assert RecognizerConfig(culture=" EN-US ").culture == "en-us"

    @pytest.mark.unit
    def test_unsupported_culture_rejected(self):
        """Test that cultures without resources fail validation"""
        with pytest.raises(ValueError):
            RecognizerConfig(**SAMPLE_CONFIGURATIONS["unsupported_culture"])

    @pytest.mark.unit
    def test_two_digit_thresholds_bounded(self):
        """Test threshold range validation"""
        with pytest.raises(ValueError):
            ResolutionConfig(min_two_digit_year_past_num=100)


class TestConfigManager:
    """Test suite for ConfigManager"""

    @pytest.fixture
    def manager(self, temp_config_dir, clean_env):
        return ConfigManager(config_path=temp_config_dir, environment="testing")

    @pytest.mark.unit
    def test_load_default_file(self, manager):
        """Test loading the default configuration file"""
        config = manager.load_config()

        assert config.culture == "en-us"
        assert config.resolution.inclusive_end_period is False

    @pytest.mark.unit
    def test_environment_file_overrides_default(self, manager, temp_config_dir):
        """Test that the environment file is merged over the defaults"""
        with open(temp_config_dir / "testing.yaml", "w") as f:
            yaml.dump(SAMPLE_CONFIGURATIONS["testing"], f)

        config = manager.load_config()

        assert config.resolution.inclusive_end_period is True
        assert config.resolution.min_two_digit_year_past_num == 40
        assert config.logging.level == "DEBUG"

    @pytest.mark.unit
    def test_env_variable_override(self, manager, clean_env):
        """Test CHRONOTEXT_<SECTION>_<KEY> overrides"""
        clean_env.setenv("CHRONOTEXT_RESOLUTION_INCLUSIVE_END_PERIOD", "true")
        clean_env.setenv("CHRONOTEXT_RESOLUTION_MAX_TWO_DIGIT_YEAR_FUTURE_NUM", "30")

        config = manager.load_config()

        assert config.resolution.inclusive_end_period is True
        assert config.resolution.max_two_digit_year_future_num == 30

    @pytest.mark.unit
    def test_unsupported_culture_raises(self, manager, clean_env):
        """Test that validation failures surface as ConfigurationError"""
        clean_env.setenv("CHRONOTEXT_CULTURE", "fr-fr")

        with pytest.raises(ConfigurationError):
            manager.load_config()

    @pytest.mark.unit
    def test_invalid_yaml_raises(self, temp_config_dir, clean_env):
        """Test that a malformed file is reported"""
        with open(temp_config_dir / "local.yaml", "w") as f:
            f.write("resolution: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir).load_config()

    @pytest.mark.unit
    def test_missing_directory_gives_defaults(self, tmp_path, clean_env):
        """Test loading without any configuration file"""
        config = ConfigManager(config_path=tmp_path / "absent").load_config()

        assert config == RecognizerConfig()

    @pytest.mark.unit
    def test_config_is_cached(self, manager):
        """Test that repeated loads return the same object"""
        assert manager.load_config() is manager.config

    @pytest.mark.unit
    def test_update_config(self, manager):
        """Test nested updates on the loaded configuration"""
        config = manager.update_config({"resolution": {"inclusive_end_period": True}})

        assert config.resolution.inclusive_end_period is True
        assert config.culture == "en-us"

    @pytest.mark.unit
    def test_update_config_validates(self, manager):
        """Test that invalid updates are rejected"""
        with pytest.raises(ConfigurationError):
            manager.update_config({"logging": {"level": "LOUD"}})

    @pytest.mark.unit
    def test_save_config(self, manager, tmp_path):
        """Test writing the configuration as YAML"""
        manager.update_config({"cache": {"enabled": False}})
        target = manager.save_config(tmp_path / "saved" / "config.yaml")

        with open(target) as f:
            saved = yaml.safe_load(f)

        assert saved["cache"]["enabled"] is False
        assert saved["culture"] == "en-us"
