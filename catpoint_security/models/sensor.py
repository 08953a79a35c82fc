"""Sensor data models."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from ..exceptions import InvalidSensorError


class SensorType(Enum):
    """Kinds of sensor the system understands."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


def _new_sensor_id() -> str:
    return str(uuid.uuid4())


@dataclass(unsafe_hash=True)
class Sensor:
    """A boolean-state device feeding the alarm state machine.

    Identity is ``(sensor_id, sensor_type)``; ``name`` and ``active`` are
    excluded from equality and hashing so a sensor keeps its place in a set
    while its state flips.
    """
    name: str = field(compare=False)
    sensor_type: SensorType
    sensor_id: str = field(default_factory=_new_sensor_id)
    active: bool = field(default=False, compare=False)

    @property
    def key(self) -> Tuple[str, SensorType]:
        """Identity key used by repositories."""
        return (self.sensor_id, self.sensor_type)

    def sort_key(self) -> Tuple[str, str, str]:
        """Display ordering: name, then type, then id."""
        return (str(self.name), self.sensor_type.name, str(self.sensor_id))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the sensor for the web API."""
        return {
            'sensor_id': self.sensor_id,
            'name': self.name,
            'sensor_type': self.sensor_type.name,
            'active': self.active
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sensor":
        """Build a sensor from a dict produced by :meth:`to_dict`.

        ``sensor_type`` is matched by member name, case-insensitively.
        Raises KeyError for an unknown type or missing field, and
        InvalidSensorError when the name is not a non-empty string.
        """
        name = data['name']
        if not isinstance(name, str) or not name.strip():
            raise InvalidSensorError(f"Sensor name must be a non-empty string, got {name!r}")
        sensor_type = SensorType[str(data['sensor_type']).upper()]
        kwargs = {
            'name': name,
            'sensor_type': sensor_type,
            'active': bool(data.get('active', False))
        }
        if data.get('sensor_id'):
            kwargs['sensor_id'] = str(data['sensor_id'])
        return cls(**kwargs)
