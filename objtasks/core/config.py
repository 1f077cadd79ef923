"""Configuration management for ObjTasks."""

import logging
import os
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OBJTASKS_CONFIG"


class SerializationConfig(BaseModel):
    """JSON output formatting."""
    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ObjTasksConfig(BaseModel):
    """Main ObjTasks configuration."""
    serialization: SerializationConfig = Field(default_factory=SerializationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(
    config_path: Optional[str] = None,
    allow_default: bool = True
) -> ObjTasksConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses $OBJTASKS_CONFIG or
            searches default locations.
        allow_default: Return the default config when no file is found.

    Returns:
        ObjTasksConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist, or no file is
            found and allow_default is False.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)

    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path is None:
        # Search default locations
        search_paths = [
            Path("objtasks.config.yaml"),
            Path("objtasks.config.yml"),
            Path(".objtasks.yaml"),
            Path.home() / ".objtasks.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    if config_path and Path(config_path).exists():
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        logger.info(f"Loaded configuration from {config_path}")
        return ObjTasksConfig(**data)

    if allow_default:
        return ObjTasksConfig()

    raise FileNotFoundError(
        "No configuration file found. Create objtasks.config.yaml, e.g.:\n"
        "serialization:\n  indent: 2"
    )


def create_default_config(output_path: str = "objtasks.config.yaml") -> ObjTasksConfig:
    """Create a default configuration file.

    Args:
        output_path: Where to save the config file.

    Returns:
        The created ObjTasksConfig.
    """
    config = ObjTasksConfig()

    with open(output_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)

    return config
