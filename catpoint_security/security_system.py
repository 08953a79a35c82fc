"""Wiring of the security service from configuration."""

from collections import deque
from datetime import datetime
from typing import Any, Deque, Dict, List, Optional

from .config_manager import ConfigManager
from .exceptions import ConfigurationError
from .logging_config import get_logger
from .models.config import SystemConfig
from .models.sensor import Sensor
from .models.status import AlarmStatus, ArmingStatus
from .services.image_service import FakeImageService, StaticImageService
from .services.interfaces import ImageServiceInterface, StatusListener
from .services.repository import InMemorySecurityRepository
from .services.security_service import SecurityService

logger = get_logger("security_system")


class EventRecorder(StatusListener):
    """Keeps the most recent listener events for display."""

    def __init__(self, max_events: int = 50):
        self.events: Deque[Dict[str, Any]] = deque(maxlen=max_events)

    def _record(self, event_type: str, value: Any = None) -> None:
        self.events.append({
            'type': event_type,
            'value': value,
            'timestamp': datetime.now().isoformat()
        })

    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        self._record('alarm_status_changed', alarm_status.name)

    def on_cat_detected(self, cat_detected: bool) -> None:
        self._record('cat_detected', cat_detected)

    def on_sensor_status_changed(self) -> None:
        self._record('sensor_status_changed')

    def recent(self) -> List[Dict[str, Any]]:
        return list(self.events)


def create_image_service(config: SystemConfig) -> ImageServiceInterface:
    """Build the verdict provider named by the configuration."""
    if config.image_service == "fake":
        return FakeImageService(config.fake_cat_probability, config.random_seed)
    if config.image_service == "static":
        return StaticImageService(config.static_verdict)
    raise ConfigurationError(f"Unknown image service: {config.image_service}")


class SecuritySystem:
    """Owns the repository, the service and the configuration hookup."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()
        config = self.config_manager.get_config()

        if not self.config_manager.validate_config():
            raise ConfigurationError(f"Invalid configuration in {self.config_manager.config_path}")

        self.repository = InMemorySecurityRepository(
            arming_status=ArmingStatus[config.initial_arming_status]
        )
        self.image_service = create_image_service(config)
        self.service = SecurityService(
            self.repository,
            self.image_service,
            sensitivity_threshold=config.sensitivity_threshold
        )
        self.event_recorder = EventRecorder(config.max_recent_events)
        self.service.add_status_listener(self.event_recorder)

        self.config_manager.register_change_callback(self._on_config_changed)
        logger.info(f"Security system ready (image service: {config.image_service}, "
                    f"arming: {config.initial_arming_status})")

    def _on_config_changed(self, config: SystemConfig) -> None:
        if config.sensitivity_threshold != self.service.sensitivity_threshold:
            self.service.sensitivity_threshold = config.sensitivity_threshold
            logger.info(f"Sensitivity threshold updated to {config.sensitivity_threshold}")
        if (isinstance(self.image_service, FakeImageService)
                and config.fake_cat_probability != self.image_service.cat_probability
                and 0.0 <= config.fake_cat_probability <= 1.0):
            self.image_service.cat_probability = config.fake_cat_probability

    def get_status(self) -> Dict[str, Any]:
        """Summarize the current state for display."""
        alarm_status = self.service.get_alarm_status()
        arming_status = self.service.get_arming_status()
        sensors = self.service.get_sensors()
        return {
            'alarm_status': alarm_status.name,
            'alarm_description': alarm_status.description,
            'arming_status': arming_status.name,
            'arming_description': arming_status.description,
            'cat_detected': self.service.cat_detected,
            'sensor_count': len(sensors),
            'active_sensor_count': sum(1 for s in sensors if s.active),
            'sensitivity_threshold': self.service.sensitivity_threshold
        }

    def find_sensor(self, sensor_id: str) -> Optional[Sensor]:
        """Look up a registered sensor by id."""
        for sensor in self.service.get_sensors():
            if sensor.sensor_id == sensor_id:
                return sensor
        return None
