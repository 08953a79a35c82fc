"""Security service: applies alarm rules against a repository."""

import threading
from typing import List, Optional, Set

from ..config.defaults import SYSTEM_CONSTANTS
from ..exceptions import ConfigurationError, InvalidImageError, InvalidSensorError, UnknownSensorError
from ..logging_config import get_logger, log_transition
from ..models.sensor import Sensor
from ..models.status import AlarmStatus, ArmingStatus
from .alarm_rules import (
    AlarmDecision,
    ArmingEvent,
    ImageVerdictEvent,
    SensorActivationEvent,
    decide,
)
from .error_handler import ErrorHandler, ErrorSeverity, global_error_handler
from .interfaces import ImageServiceInterface, NDArray, SecurityRepositoryInterface, StatusListener

logger = get_logger("security_service")


class SecurityService:
    """Receives sensor, arming and camera events and keeps the alarm status.

    Each public operation reads the repository, asks :mod:`alarm_rules` for
    a decision, writes the result back and notifies listeners before
    returning. Operations are serialized with a re-entrant lock.
    """

    def __init__(self,
                 repository: SecurityRepositoryInterface,
                 image_service: ImageServiceInterface,
                 sensitivity_threshold: float = SYSTEM_CONSTANTS["DEFAULT_SENSITIVITY_THRESHOLD"],
                 error_handler: Optional[ErrorHandler] = None):
        if repository is None:
            raise ValueError("A security repository is required")
        if image_service is None:
            raise ValueError("An image service is required")

        self._repository = repository
        self._image_service = image_service
        self._error_handler = error_handler or global_error_handler
        self._status_listeners: List[StatusListener] = []
        self._lock = threading.RLock()
        self._cat_detected = False
        self._sensitivity_threshold = SYSTEM_CONSTANTS["DEFAULT_SENSITIVITY_THRESHOLD"]

        self.sensitivity_threshold = sensitivity_threshold

    # Listeners

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener; registering twice has no effect."""
        if listener not in self._status_listeners:
            self._status_listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister a listener; unknown listeners are ignored."""
        if listener in self._status_listeners:
            self._status_listeners.remove(listener)

    @property
    def status_listeners(self) -> List[StatusListener]:
        return list(self._status_listeners)

    # State accessors

    def get_alarm_status(self) -> AlarmStatus:
        return self._repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self._repository.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self._repository.get_sensors()

    @property
    def cat_detected(self) -> bool:
        """Verdict of the most recently processed image."""
        return self._cat_detected

    @property
    def sensitivity_threshold(self) -> float:
        return self._sensitivity_threshold

    @sensitivity_threshold.setter
    def sensitivity_threshold(self, value: float) -> None:
        low = SYSTEM_CONSTANTS["MIN_SENSITIVITY_THRESHOLD"]
        high = SYSTEM_CONSTANTS["MAX_SENSITIVITY_THRESHOLD"]
        try:
            threshold = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid sensitivity threshold: {value!r}") from e
        if not low <= threshold <= high:
            raise ConfigurationError(f"Sensitivity threshold must be within [{low}, {high}], got {threshold}")
        self._sensitivity_threshold = threshold

    # Operations

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Arm or disarm the system.

        Disarming clears the alarm. Arming deactivates every sensor through
        the regular activation rules, and raises the alarm at once when
        arming at home after a cat was seen.
        """
        if not isinstance(arming_status, ArmingStatus):
            raise TypeError(f"Expected ArmingStatus, got {arming_status!r}")

        with self._lock:
            decision = decide(
                self._repository.get_alarm_status(),
                self._repository.get_arming_status(),
                ArmingEvent(arming_status, self._cat_detected)
            )
            self._repository.set_arming_status(arming_status)
            logger.info(f"Arming status set to {arming_status.name}")
            self._apply(decision)

            if decision.reset_sensors:
                for sensor in sorted(self._repository.get_sensors(), key=lambda s: str(s.sensor_id)):
                    self._apply_sensor_activation(sensor, False)

            self._notify_sensor_status_changed()

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Record a sensor's activation value and update the alarm status."""
        with self._lock:
            self._require_registered(sensor)
            self._apply_sensor_activation(sensor, bool(active))
            self._notify_sensor_status_changed()

    def process_image(self, image: NDArray) -> bool:
        """Ask the verdict provider about ``image`` and react to the answer.

        Returns the verdict.
        """
        if image is None:
            raise InvalidImageError("No image supplied")

        with self._lock:
            cat_detected = bool(self._image_service.image_contains_cat(image, self._sensitivity_threshold))
            self._cat_detected = cat_detected

            any_sensor_active = any(s.active for s in self._repository.get_sensors())
            decision = decide(
                self._repository.get_alarm_status(),
                self._repository.get_arming_status(),
                ImageVerdictEvent(cat_detected, any_sensor_active)
            )
            self._apply(decision)
            self._notify("on_cat_detected", cat_detected)
            return cat_detected

    def add_sensor(self, sensor: Sensor) -> None:
        if sensor is None:
            raise InvalidSensorError("No sensor supplied")
        with self._lock:
            self._repository.add_sensor(sensor)
            self._notify_sensor_status_changed()

    def remove_sensor(self, sensor: Sensor) -> None:
        if sensor is None:
            raise InvalidSensorError("No sensor supplied")
        with self._lock:
            self._repository.remove_sensor(sensor)
            self._notify_sensor_status_changed()

    # Internals

    def _require_registered(self, sensor: Sensor) -> None:
        if sensor is None:
            raise InvalidSensorError("No sensor supplied")
        if sensor not in self._repository.get_sensors():
            raise UnknownSensorError(f"Sensor {sensor.sensor_id} is not registered")

    def _apply_sensor_activation(self, sensor: Sensor, active: bool) -> None:
        was_active = sensor.active
        sensor.active = active
        self._repository.update_sensor(sensor)

        other_sensors_active = any(
            s.active for s in self._repository.get_sensors() if s != sensor
        )
        decision = decide(
            self._repository.get_alarm_status(),
            self._repository.get_arming_status(),
            SensorActivationEvent(was_active, active, other_sensors_active)
        )
        self._apply(decision)

    def _apply(self, decision: AlarmDecision) -> None:
        if not decision.changes_status:
            logger.debug(f"No alarm status change ({decision.rule.value})")
            return

        previous = self._repository.get_alarm_status()
        self._repository.set_alarm_status(decision.alarm_status)
        log_transition(
            logger,
            f"Alarm status {previous.name} -> {decision.alarm_status.name}",
            rule=decision.rule.value,
            arming=self._repository.get_arming_status().name
        )
        self._notify("on_alarm_status_changed", decision.alarm_status)

    def _notify_sensor_status_changed(self) -> None:
        self._notify("on_sensor_status_changed")

    def _notify(self, method_name: str, *args) -> None:
        for listener in list(self._status_listeners):
            try:
                getattr(listener, method_name)(*args)
            except Exception as e:
                self._error_handler.handle_error("status_listener", e, ErrorSeverity.LOW)
