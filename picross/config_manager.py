"""Configuration persistence manager for picross processing defaults.

This module handles loading and saving of ProcessingConfig to/from JSON files.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from .models import CONFIG_FILE, ProcessingConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Handles loading and saving of processing configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.picross_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> ProcessingConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            ProcessingConfig with loaded or default values
        """
        config = ProcessingConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Unknown keys are ignored, missing keys keep defaults
                config = ProcessingConfig.from_dict(data)
                config.validate()
                logger.info(f"Loaded configuration from {self.config_path}")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Could not load config file: {e}")
            config = ProcessingConfig()

        return config

    def save(self, config: ProcessingConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ProcessingConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = asdict(config)
        data["board_policy"] = config.board_policy.value
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
