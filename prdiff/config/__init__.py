"""Configuration loading and validation."""

from prdiff.config.loader import LOCAL_CONFIG_NAME, load_config
from prdiff.config.schema import GitHubSettings, PrdiffConfig

__all__ = [
    "GitHubSettings",
    "LOCAL_CONFIG_NAME",
    "PrdiffConfig",
    "load_config",
]
