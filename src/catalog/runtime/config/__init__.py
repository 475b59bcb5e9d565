"""Configuration models and loaders."""

from .config_data import (
    AppConfig,
    CatalogConfig,
    ConfigData,
    CORSConfig,
    DatabaseConfig,
    LoggingConfig,
)
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "ConfigData",
    "CORSConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
