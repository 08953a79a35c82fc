"""Configuration management with JSON persistence and change callbacks."""

import json
import os
from dataclasses import asdict, fields
from typing import Optional, Dict, Any, Callable, List

from .models.config import SystemConfig
from .models.status import ArmingStatus
from .config.defaults import DEFAULT_CONFIG, DEFAULT_PATHS, SYSTEM_CONSTANTS, IMAGE_SERVICES
from .logging_config import get_logger

logger = get_logger("config_manager")


class ConfigManager:
    """Manages system configuration with file persistence."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_PATHS["config_file"]
        self._config: Optional[SystemConfig] = None
        self._config_change_callbacks: List[Callable[[SystemConfig], None]] = []

        self.load_config()

    def load_config(self) -> SystemConfig:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    config_dict = json.load(f)
                self._config = self._from_dict(config_dict)
            except (json.JSONDecodeError, TypeError, AttributeError) as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}. Using defaults.")
                self._config = SystemConfig()
        else:
            self._config = SystemConfig()
            self.save_config()

        return self._config

    @staticmethod
    def _from_dict(config_dict: Dict[str, Any]) -> SystemConfig:
        """Build a config from file contents; unknown keys are dropped."""
        known = {f.name for f in fields(SystemConfig)}
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in config_dict.items() if k in known})
        return SystemConfig(**{k: v for k, v in merged.items() if k in known})

    def save_config(self) -> None:
        """Save current configuration to file."""
        if self._config is None:
            return

        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(asdict(self._config), f, indent=2)

    def get_config(self) -> SystemConfig:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values."""
        if self._config is None:
            self.load_config()

        for key, value in kwargs.items():
            if hasattr(self._config, key):
                setattr(self._config, key, value)
            else:
                logger.debug(f"Ignoring unknown config key: {key}")

        self.save_config()

        for callback in self._config_change_callbacks:
            try:
                callback(self._config)
            except Exception as e:
                logger.error(f"Error in config change callback: {e}", exc_info=True)

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def validate_config(self, config: Optional[SystemConfig] = None) -> bool:
        """Validate the current configuration, or a candidate one.

        Values of the wrong type fail validation rather than raising.
        """
        if config is None:
            config = self._config
        if config is None:
            return False

        if not self._is_number(config.sensitivity_threshold) or not (
                SYSTEM_CONSTANTS["MIN_SENSITIVITY_THRESHOLD"] <= config.sensitivity_threshold
                <= SYSTEM_CONSTANTS["MAX_SENSITIVITY_THRESHOLD"]):
            return False

        if not isinstance(config.image_service, str) or config.image_service not in IMAGE_SERVICES:
            return False

        if not self._is_number(config.fake_cat_probability) or not 0.0 <= config.fake_cat_probability <= 1.0:
            return False

        if not isinstance(config.initial_arming_status, str) or \
                config.initial_arming_status not in ArmingStatus.__members__:
            return False

        for value in (config.web_port, config.max_recent_events):
            if not isinstance(value, int) or isinstance(value, bool):
                return False
        if not 0 < config.web_port < 65536 or config.max_recent_events < 1:
            return False

        if not isinstance(config.log_level, str) or \
                config.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return False

        return True

    def register_change_callback(self, callback: Callable[[SystemConfig], None]) -> None:
        """Register a callback to be called when config changes."""
        if callback not in self._config_change_callbacks:
            self._config_change_callbacks.append(callback)

    def unregister_change_callback(self, callback: Callable[[SystemConfig], None]) -> None:
        """Unregister a config change callback."""
        if callback in self._config_change_callbacks:
            self._config_change_callbacks.remove(callback)
