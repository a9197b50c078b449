"""Configuration file loading and merging."""

import logging
from pathlib import Path

import yaml

from pptb_scaffold.config.schema import DEFAULT_CONFIG, ScaffoldConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".pptb"
CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.pptb/config.yaml."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.pptb/config.yaml."""
    return Path.cwd() / CONFIG_DIRNAME / CONFIG_FILENAME


def home_config_exists() -> bool:
    """Check if the global home config exists."""
    return get_home_config_path().exists()


def local_config_exists() -> bool:
    """Check if the local config exists."""
    return get_local_config_path().exists()


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return None
            if not isinstance(data, dict):
                logger.warning("Ignoring %s: expected a mapping", path)
                return None
            result: dict[str, object] = data
            return result
    except yaml.YAMLError as e:
        logger.warning("Ignoring malformed config %s: %s", path, e)
        return None


def load_config() -> ScaffoldConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.pptb/config.yaml)
    3. Local config (./.pptb/config.yaml)

    Returns merged ScaffoldConfig.
    """
    config = DEFAULT_CONFIG

    for path in (get_home_config_path(), get_local_config_path()):
        data = load_yaml_config(path)
        if data:
            logger.debug("Loaded config %s", path)
            config = config.merge(ScaffoldConfig.from_dict(data))

    return config
