"""
Tests for configuration loading
"""
import pytest

from trendmaps import config as config_module
from trendmaps.config import TrendsConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop TRENDS_* overrides from the environment"""
    for name in ('TRENDS_HL', 'TRENDS_TZ', 'TRENDS_BASE_URL'):
        monkeypatch.delenv(name, raising=False)


class TestTrendsConfig:
    """Test suite for TrendsConfig"""

    def test_defaults(self):
        """Test built-in defaults"""
        config = TrendsConfig()

        assert config.hl == 'en-US'
        assert config.tz == 360
        assert config.default_period == 'today 12-m'
        assert config.base_url == 'https://trends.google.com'
        assert config.timeout == (5.0, 10.0)

    def test_rejects_non_positive_timeout(self):
        """Test timeouts must be positive"""
        with pytest.raises(ValueError):
            TrendsConfig(read_timeout=0)


class TestLoadConfig:
    """Test suite for load_config"""

    def test_yaml_section(self, tmp_path):
        """Test the google_trends section overrides defaults"""
        path = tmp_path / 'trends.yaml'
        path.write_text(
            "google_trends:\n"
            "  hl: fr-FR\n"
            "  tz: -60\n"
            "  read_timeout: 30\n"
        )

        config = load_config(str(path))

        assert config.hl == 'fr-FR'
        assert config.tz == -60
        assert config.read_timeout == 30.0
        assert config.connect_timeout == 5.0

    def test_file_without_section_uses_defaults(self, tmp_path):
        """Test a file without the section keeps defaults"""
        path = tmp_path / 'other.yaml'
        path.write_text("database:\n  dsn: postgresql://\n")

        assert load_config(str(path)) == TrendsConfig()

    def test_missing_file_falls_back_to_defaults(self, tmp_path, caplog):
        """Test an unreadable file logs a warning and keeps defaults"""
        config = load_config(str(tmp_path / 'missing.yaml'))

        assert config == TrendsConfig()
        assert 'Could not load config' in caplog.text

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables win over the file"""
        path = tmp_path / 'trends.yaml'
        path.write_text("google_trends:\n  hl: fr-FR\n")
        monkeypatch.setenv('TRENDS_HL', 'de-DE')
        monkeypatch.setenv('TRENDS_TZ', '120')

        config = load_config(str(path))

        assert config.hl == 'de-DE'
        assert config.tz == 120

    def test_standard_path_ignored_when_absent(self, tmp_path, monkeypatch):
        """Test defaults are used when no config file exists"""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config_module, 'STANDARD_CONFIG_PATH', str(tmp_path / 'nope.yaml'))

        assert load_config() == TrendsConfig()

    def test_standard_path_used_when_present(self, tmp_path, monkeypatch):
        """Test the checkout config is read when present"""
        monkeypatch.chdir(tmp_path)
        path = tmp_path / 'trends_config.yaml'
        path.write_text("google_trends:\n  default_period: today 3-m\n")
        monkeypatch.setattr(config_module, 'STANDARD_CONFIG_PATH', str(path))

        assert load_config().default_period == 'today 3-m'

    def test_working_directory_config_used(self, tmp_path, monkeypatch):
        """Test config/trends_config.yaml under the working directory is read first"""
        (tmp_path / 'config').mkdir()
        (tmp_path / 'config' / 'trends_config.yaml').write_text("google_trends:\n  hl: ja-JP\n")
        checkout = tmp_path / 'checkout.yaml'
        checkout.write_text("google_trends:\n  hl: fr-FR\n")
        monkeypatch.setattr(config_module, 'STANDARD_CONFIG_PATH', str(checkout))
        monkeypatch.chdir(tmp_path)

        assert load_config().hl == 'ja-JP'
