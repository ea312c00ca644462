"""
Configuration for the Google Trends client

Settings come from three layers, later ones winning:
    1. defaults on TrendsConfig
    2. the ``google_trends`` section of a YAML file
    3. TRENDS_* environment variables

Example:
    config = load_config('config/trends_config.yaml')
    print(config.hl, config.tz)
"""
import logging
import os
from typing import Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CWD_CONFIG_PATH = os.path.join('config', 'trends_config.yaml')

# Only exists in a source checkout or editable install
STANDARD_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'config', 'trends_config.yaml'
)


class TrendsConfig(BaseModel):
    """Settings shared by the client and its request handler"""

    # Query defaults
    hl: str = 'en-US'
    tz: int = 360  # minutes offset from UTC, as the web UI sends it
    default_period: str = 'today 12-m'

    # Transport
    base_url: str = 'https://trends.google.com'
    connect_timeout: float = Field(5.0, gt=0)
    read_timeout: float = Field(10.0, gt=0)
    user_agent: str = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    )
    proxies: Dict[str, str] = Field(default_factory=dict)

    class Config:
        extra = "ignore"

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) tuple in the form requests expects"""
        return (self.connect_timeout, self.read_timeout)


ENV_OVERRIDES = {
    'TRENDS_HL': 'hl',
    'TRENDS_TZ': 'tz',
    'TRENDS_BASE_URL': 'base_url',
}


def _read_yaml_section(path: str) -> Dict:
    """Return the google_trends section of a YAML file, or {} if unreadable"""
    try:
        with open(path, 'r') as f:
            file_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}

    if file_config and 'google_trends' in file_config:
        logger.info(f"Loaded config from {path}")
        return file_config['google_trends'] or {}
    return {}


def load_config(config_path: Optional[str] = None) -> TrendsConfig:
    """
    Load client configuration

    Args:
        config_path: Path to a YAML file (optional). When omitted the first
            existing config/trends_config.yaml is used, looked up relative
            to the working directory and then to the source checkout.

    Returns:
        TrendsConfig instance
    """
    values: Dict = {}

    if not config_path:
        config_path = next(
            (p for p in (CWD_CONFIG_PATH, STANDARD_CONFIG_PATH) if os.path.exists(p)),
            None
        )
    if config_path:
        values.update(_read_yaml_section(config_path))

    for env_name, field_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[field_name] = env_value

    return TrendsConfig(**values)
