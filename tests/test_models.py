"""Unit tests for sensor and status models."""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.exceptions import InvalidSensorError
from catpoint_security.models.sensor import Sensor, SensorType
from catpoint_security.models.status import AlarmStatus, ArmingStatus


class TestSensor(unittest.TestCase):
    """Test cases for Sensor."""

    def test_defaults(self):
        """A new sensor is inactive and gets a generated id."""
        sensor = Sensor("Front door", SensorType.DOOR)
        self.assertFalse(sensor.active)
        self.assertTrue(sensor.sensor_id)
        self.assertNotEqual(sensor.sensor_id, Sensor("Front door", SensorType.DOOR).sensor_id)

    def test_identity_ignores_name_and_active(self):
        """Equality and hashing use id and type only."""
        first = Sensor("Kitchen", SensorType.WINDOW, sensor_id="w-1")
        second = Sensor("Renamed", SensorType.WINDOW, sensor_id="w-1", active=True)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second}), 1)

    def test_identity_includes_type(self):
        door = Sensor("Porch", SensorType.DOOR, sensor_id="s-1")
        motion = Sensor("Porch", SensorType.MOTION, sensor_id="s-1")
        self.assertNotEqual(door, motion)

    def test_set_membership_survives_activation(self):
        """Flipping active keeps the sensor findable in a set."""
        sensor = Sensor("Hall", SensorType.MOTION)
        sensors = {sensor}
        sensor.active = True
        self.assertIn(sensor, sensors)

    def test_sort_key(self):
        sensors = [
            Sensor("b", SensorType.DOOR, sensor_id="2"),
            Sensor("a", SensorType.WINDOW, sensor_id="3"),
            Sensor("a", SensorType.DOOR, sensor_id="1"),
        ]
        ordered = sorted(sensors, key=Sensor.sort_key)
        self.assertEqual([s.sensor_id for s in ordered], ["1", "3", "2"])

    def test_dict_conversion(self):
        sensor = Sensor("Back door", SensorType.DOOR, sensor_id="d-7", active=True)
        data = sensor.to_dict()
        self.assertEqual(data, {
            'sensor_id': 'd-7',
            'name': 'Back door',
            'sensor_type': 'DOOR',
            'active': True
        })

        restored = Sensor.from_dict(data)
        self.assertEqual(restored, sensor)
        self.assertTrue(restored.active)

    def test_from_dict_type_case_insensitive(self):
        sensor = Sensor.from_dict({'name': 'Garage', 'sensor_type': 'motion'})
        self.assertEqual(sensor.sensor_type, SensorType.MOTION)
        self.assertFalse(sensor.active)

    def test_from_dict_unknown_type(self):
        with self.assertRaises(KeyError):
            Sensor.from_dict({'name': 'Roof', 'sensor_type': 'chimney'})

    def test_from_dict_rejects_bad_names(self):
        for name in (5, None, "", "   ", ["Front"]):
            with self.subTest(name=name):
                with self.assertRaises(InvalidSensorError):
                    Sensor.from_dict({'name': name, 'sensor_type': 'door'})


class TestStatusEnums(unittest.TestCase):
    """Test cases for AlarmStatus and ArmingStatus."""

    def test_alarm_status_descriptions(self):
        self.assertEqual(AlarmStatus.NO_ALARM.description, "Cool and Good")
        self.assertEqual(AlarmStatus.PENDING_ALARM.description, "I'm in Danger...")
        self.assertEqual(AlarmStatus.ALARM.description, "Awooga!")
        self.assertEqual(AlarmStatus.ALARM.color, (250, 80, 50))

    def test_arming_status_is_armed(self):
        self.assertFalse(ArmingStatus.DISARMED.is_armed)
        self.assertTrue(ArmingStatus.ARMED_HOME.is_armed)
        self.assertTrue(ArmingStatus.ARMED_AWAY.is_armed)
        self.assertEqual(ArmingStatus.ARMED_AWAY.description, "Armed - Away")


if __name__ == '__main__':
    unittest.main()
