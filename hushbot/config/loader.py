"""Configuration loading: camelCase JSON under ~/.hushbot/<agent>/."""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from hushbot.config.schema import Config
from hushbot.utils.helpers import get_hushbot_home

DEFAULT_AGENT_NAME = "default"


def get_agent_dir(agent_name: str = DEFAULT_AGENT_NAME) -> Path:
    return get_hushbot_home() / agent_name


def get_config_path(agent_name: str = DEFAULT_AGENT_NAME) -> Path:
    return get_agent_dir(agent_name) / "config.json"


def get_data_dir(config: Config) -> Path:
    """Directory for the file-backed stores.

    ``storage.data_dir`` when set, else the agent directory.  Created if
    missing.
    """
    path = config.storage.data_dir or get_agent_dir(config.agent_name)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_config(
    config_path: Path | None = None,
    agent_name: str = DEFAULT_AGENT_NAME,
) -> Config:
    """
    Load the config for *agent_name*, or defaults.

    A missing, unparsable or invalid file logs a warning and yields the
    default :class:`Config`; it never raises.
    """
    path = config_path or get_config_path(agent_name)

    config: Config | None = None
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                config = Config.model_validate(convert_keys(json.load(f)))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {path}: {e}; using defaults")

    config = config or Config()
    config._agent_name = agent_name
    return config


def convert_keys(data: Any) -> Any:
    """Recursively turn camelCase dict keys into snake_case."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() and i else c.lower() for i, c in enumerate(name))
