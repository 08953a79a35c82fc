"""Unit tests for security system wiring."""

import unittest
import os
import shutil
import tempfile
import sys

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.config_manager import ConfigManager
from catpoint_security.exceptions import ConfigurationError
from catpoint_security.models.config import SystemConfig
from catpoint_security.models.sensor import Sensor, SensorType
from catpoint_security.models.status import AlarmStatus, ArmingStatus
from catpoint_security.security_system import EventRecorder, SecuritySystem, create_image_service
from catpoint_security.services.image_service import FakeImageService, StaticImageService


class TestSecuritySystem(unittest.TestCase):
    """Test cases for SecuritySystem."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_manager = ConfigManager(os.path.join(self.test_dir, "config.json"))

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_create_image_service(self):
        self.assertIsInstance(create_image_service(SystemConfig()), FakeImageService)

        static = create_image_service(SystemConfig(image_service="static", static_verdict=True))
        self.assertIsInstance(static, StaticImageService)
        self.assertTrue(static.verdict)

        with self.assertRaises(ConfigurationError):
            create_image_service(SystemConfig(image_service="aws"))

    def test_initial_arming_status_from_config(self):
        self.config_manager.update_config(initial_arming_status="ARMED_AWAY")
        system = SecuritySystem(self.config_manager)
        self.assertEqual(system.service.get_arming_status(), ArmingStatus.ARMED_AWAY)

    def test_invalid_config_rejected(self):
        self.config_manager.update_config(sensitivity_threshold=500.0)
        with self.assertRaises(ConfigurationError):
            SecuritySystem(self.config_manager)

    def test_non_numeric_threshold_on_disk_rejected(self):
        with open(self.config_manager.config_path, 'w') as f:
            f.write('{"sensitivity_threshold": "abc"}')

        with self.assertRaises(ConfigurationError):
            SecuritySystem(ConfigManager(self.config_manager.config_path))

    def test_config_change_updates_service(self):
        system = SecuritySystem(self.config_manager)

        self.config_manager.update_config(sensitivity_threshold=80.0, fake_cat_probability=1.0)

        self.assertEqual(system.service.sensitivity_threshold, 80.0)
        self.assertEqual(system.image_service.cat_probability, 1.0)

    def test_event_recorder_receives_events(self):
        self.config_manager.update_config(image_service="static", static_verdict=True,
                                          initial_arming_status="ARMED_HOME")
        system = SecuritySystem(self.config_manager)

        system.service.process_image(np.zeros((4, 4, 3), dtype=np.uint8))

        events = system.event_recorder.recent()
        self.assertEqual([e['type'] for e in events], ['alarm_status_changed', 'cat_detected'])
        self.assertEqual(events[0]['value'], 'ALARM')
        self.assertTrue(events[1]['value'])

    def test_status_and_find_sensor(self):
        system = SecuritySystem(self.config_manager)
        sensor = Sensor("Hall", SensorType.MOTION)
        system.service.add_sensor(sensor)

        status = system.get_status()
        self.assertEqual(status['alarm_status'], AlarmStatus.NO_ALARM.name)
        self.assertEqual(status['arming_description'], "Disarmed")
        self.assertEqual(status['sensor_count'], 1)
        self.assertEqual(status['active_sensor_count'], 0)

        self.assertIs(system.find_sensor(sensor.sensor_id), sensor)
        self.assertIsNone(system.find_sensor("missing"))


class TestEventRecorder(unittest.TestCase):
    """Test cases for EventRecorder."""

    def test_bounded_history(self):
        recorder = EventRecorder(max_events=2)
        recorder.on_sensor_status_changed()
        recorder.on_cat_detected(False)
        recorder.on_alarm_status_changed(AlarmStatus.PENDING_ALARM)

        events = recorder.recent()
        self.assertEqual(len(events), 2)
        self.assertEqual(events[0]['type'], 'cat_detected')
        self.assertEqual(events[1]['value'], 'PENDING_ALARM')


if __name__ == '__main__':
    unittest.main()
