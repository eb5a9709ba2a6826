"""Configuration module for hushbot."""

from hushbot.config.loader import (
    load_config,
    get_config_path,
    get_agent_dir,
    get_data_dir,
    DEFAULT_AGENT_NAME,
)
from hushbot.config.schema import AgentConfig, Config, ModelsConfig, MuteConfig, StorageConfig

__all__ = [
    "Config",
    "AgentConfig",
    "ModelsConfig",
    "MuteConfig",
    "StorageConfig",
    "load_config",
    "get_config_path",
    "get_agent_dir",
    "get_data_dir",
    "DEFAULT_AGENT_NAME",
]
