"""Default configuration values and constants."""

from typing import Dict, Any

# Default system configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Image verdict settings
    "sensitivity_threshold": 50.0,
    "image_service": "fake",
    "fake_cat_probability": 0.5,
    "random_seed": None,
    "static_verdict": False,

    # Startup state
    "initial_arming_status": "DISARMED",

    # Web settings
    "web_host": "0.0.0.0",
    "web_port": 5000,
    "max_recent_events": 50,

    # Logging settings
    "log_level": "INFO",
    "log_dir": "logs"
}

# System constants
SYSTEM_CONSTANTS = {
    "DEFAULT_SENSITIVITY_THRESHOLD": 50.0,
    "MIN_SENSITIVITY_THRESHOLD": 0.0,
    "MAX_SENSITIVITY_THRESHOLD": 100.0,
    "MAX_UPLOAD_SIZE_MB": 16,
    "LOG_ROTATION_SIZE_MB": 10,
    "LOG_BACKUP_COUNT": 5
}

# File paths and directories
DEFAULT_PATHS = {
    "config_file": "config.json",
    "logs_dir": "logs"
}

IMAGE_SERVICES = ("fake", "static")
