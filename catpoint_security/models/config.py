"""Configuration data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SystemConfig:
    """System configuration settings."""
    # Image verdict settings
    sensitivity_threshold: float = 50.0
    image_service: str = "fake"  # fake, static
    fake_cat_probability: float = 0.5
    random_seed: Optional[int] = None
    static_verdict: bool = False

    # Startup state
    initial_arming_status: str = "DISARMED"

    # Web settings
    web_host: str = "0.0.0.0"
    web_port: int = 5000
    max_recent_events: int = 50

    # Logging settings
    log_level: str = "INFO"
    log_dir: str = "logs"
