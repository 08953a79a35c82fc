"""Service interfaces and abstract base classes."""

from abc import ABC, abstractmethod
from typing import Set

import numpy as np

from ..models.sensor import Sensor
from ..models.status import AlarmStatus, ArmingStatus

NDArray = np.ndarray


class SecurityRepositoryInterface(ABC):
    """Interface for the store holding sensors, alarm and arming status."""

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        """Get the current alarm status."""
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Replace the current alarm status."""
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        """Get the current arming status."""
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Replace the current arming status."""
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Get all registered sensors."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Register a sensor."""
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Unregister a sensor; missing sensors are ignored."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist the current state of a registered sensor."""
        pass


class ImageServiceInterface(ABC):
    """Interface for the cat verdict provider."""

    @abstractmethod
    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        """Return True if the image contains a cat at the given threshold."""
        pass


class StatusListener(ABC):
    """Receives state changes from the security service."""

    @abstractmethod
    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        """Called after every alarm status write."""
        pass

    @abstractmethod
    def on_cat_detected(self, cat_detected: bool) -> None:
        """Called with the verdict of every processed image."""
        pass

    @abstractmethod
    def on_sensor_status_changed(self) -> None:
        """Called when sensors were added, removed or changed state."""
        pass
