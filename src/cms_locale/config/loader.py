import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from cms_locale.parsing.locales import LocaleSpec, parse_locale_specs
from cms_locale.retrieval.client import ClientConfig

DEFAULT_CONFIG_PATH = Path("cms_locale.config.yaml")
ACCESS_TOKEN_ENV = "CMS_LOCALE_ACCESS_TOKEN"


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to cms_locale.config.yaml

    Returns:
        Dictionary with the validated configuration

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    # Validate structure
    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    if "version" not in config:
        raise ValueError("Config must have 'version' field")

    contentful = config.get("contentful")
    if not isinstance(contentful, dict):
        raise ValueError("Config must have a 'contentful' section")
    for field in ["space", "access_token"]:
        if field not in contentful and not (field == "access_token" and os.environ.get(ACCESS_TOKEN_ENV)):
            raise ValueError(f"Config 'contentful' section missing required field: {field}")

    locales = config.get("locales")
    if locales is not None and not isinstance(locales, list):
        raise ValueError("Config 'locales' must be a list")

    return config


def get_client_settings(config: Dict[str, Any]) -> ClientConfig:
    """
    Build client settings from the `contentful` section.

    The CMS_LOCALE_ACCESS_TOKEN environment variable, when set, takes
    precedence over the token in the file.
    """
    section = dict(config.get("contentful", {}))
    env_token = os.environ.get(ACCESS_TOKEN_ENV)
    if env_token:
        section["access_token"] = env_token
    return ClientConfig(**section)


def get_locale_specs(config: Dict[str, Any]) -> List[LocaleSpec]:
    """Configured locales as LocaleSpecs; empty when localization is off."""
    return list(parse_locale_specs(config.get("locales")))
