"""Configuration management for the portal library viewer."""

import json
import logging
from pathlib import Path

from portallib.models import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads user configuration from config.json.

    Missing or corrupted files never stop the viewer from starting; the
    defaults are used instead.
    """

    def __init__(self, config_path: Path | str | None = None):
        """Initialize ConfigManager.

        Args:
            config_path: Path to config file. Defaults to config.json in the working directory.
        """
        if config_path is None:
            self.config_path = Path("config.json")
        else:
            self.config_path = Path(config_path)

        self._config: Config | None = None

    def load(self) -> Config:
        """Load configuration from config.json.

        Returns default config if file is missing or corrupted.

        Returns:
            Config instance
        """
        # Return cached config if already loaded
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            logger.info(f"Config file not found at {self.config_path}, using defaults")
            self._config = Config.default()
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            self._config = Config.from_dict(data)
            logger.info(f"Loaded configuration from {self.config_path}")
            return self._config

        except json.JSONDecodeError as e:
            logger.warning(
                f"Corrupted config file at {self.config_path}: {e}. Using defaults."
            )
            self._config = Config.default()
            return self._config

        except (ValueError, OSError) as e:
            logger.warning(
                f"Error loading config from {self.config_path}: {e}. Using defaults."
            )
            self._config = Config.default()
            return self._config

