"""
Catpoint Security

A home security status engine: tracks arming state, sensor activation and
camera-based cat detection, and derives an alarm status from them.
"""

__version__ = "1.0.0"

from .config_manager import ConfigManager
from .exceptions import (
    SecurityError,
    InvalidSensorError,
    UnknownSensorError,
    InvalidImageError,
    ConfigurationError
)
from .models import (
    Sensor,
    SensorType,
    AlarmStatus,
    ArmingStatus,
    SystemConfig
)
from .services import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListener,
    InMemorySecurityRepository,
    FakeImageService,
    StaticImageService,
    SecurityService
)

__all__ = [
    # Core management
    'ConfigManager',
    'SecurityService',

    # Data models
    'Sensor',
    'SensorType',
    'AlarmStatus',
    'ArmingStatus',
    'SystemConfig',

    # Boundaries and implementations
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListener',
    'InMemorySecurityRepository',
    'FakeImageService',
    'StaticImageService',

    # Errors
    'SecurityError',
    'InvalidSensorError',
    'UnknownSensorError',
    'InvalidImageError',
    'ConfigurationError'
]
