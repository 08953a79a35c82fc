"""In-memory security repository."""

from typing import Dict, Iterable, Optional, Set, Tuple

from ..exceptions import UnknownSensorError
from ..models.sensor import Sensor, SensorType
from ..models.status import AlarmStatus, ArmingStatus
from ..logging_config import get_logger
from .interfaces import SecurityRepositoryInterface

logger = get_logger("repository")


class InMemorySecurityRepository(SecurityRepositoryInterface):
    """Keeps sensors and statuses in process memory."""

    def __init__(self,
                 sensors: Optional[Iterable[Sensor]] = None,
                 alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
                 arming_status: ArmingStatus = ArmingStatus.DISARMED):
        self._sensors: Dict[Tuple[str, SensorType], Sensor] = {}
        self._alarm_status = alarm_status
        self._arming_status = arming_status

        for sensor in sensors or ():
            self._sensors[sensor.key] = sensor

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.key] = sensor
        logger.debug(f"Sensor added: {sensor.name} ({sensor.sensor_id})")

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.key, None) is not None:
            logger.debug(f"Sensor removed: {sensor.name} ({sensor.sensor_id})")

    def update_sensor(self, sensor: Sensor) -> None:
        if sensor.key not in self._sensors:
            raise UnknownSensorError(f"Sensor {sensor.sensor_id} is not registered")
        self._sensors[sensor.key] = sensor

