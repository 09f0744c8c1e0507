"""
Configuration management for the SatCat toolkit.
Loads YAML configs with pydantic validation.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class CatalogConfig(BaseModel):
    """Where catalog data comes from."""

    source_path: Path = Field(Path("data/satcat.json"), description="Local SATCAT JSON document")
    remote_url: Optional[str] = Field(None, description="URL serving a SATCAT JSON array")
    request_timeout_seconds: float = Field(30.0, gt=0, description="Timeout for remote downloads")

    class Config:
        """Pydantic config."""
        validate_assignment = True


class LoggingConfig(BaseModel):
    """Logging settings applied by the scripts."""

    level: str = Field("INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", description="Minimum log level")
    log_file: Optional[Path] = Field(None, description="Rotating log file (console only if unset)")

    class Config:
        """Pydantic config."""
        validate_assignment = True


class Config:
    """Main configuration manager."""

    def __init__(self, config_dir: Path = Path("config")):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir)
        self.catalog: Optional[CatalogConfig] = None
        self.logging: Optional[LoggingConfig] = None

    def load_all(self):
        """Load all configuration files."""
        self.catalog = self.load_config("catalog.yaml", CatalogConfig)
        self.logging = self.load_config("logging.yaml", LoggingConfig)

    def load_config(self, filename: str, config_class: type[BaseModel]) -> BaseModel:
        """
        Load and validate a configuration file.

        Args:
            filename: Config file name
            config_class: Pydantic model class for validation

        Returns:
            Validated configuration object

        Example:
            >>> config = Config()
            >>> catalog_config = config.load_config("catalog.yaml", CatalogConfig)
            >>> print(f"Reading {catalog_config.source_path}")
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            # Return default configuration
            return config_class()

        with open(filepath, 'r') as f:
            config_dict = yaml.safe_load(f)

        if config_dict is None:
            return config_class()

        return config_class(**config_dict)

    def save_config(self, config: BaseModel, filename: str):
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save
            filename: Output filename
        """
        filepath = self.config_dir / filename
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
