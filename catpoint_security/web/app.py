"""Flask application exposing the security system as a JSON API."""

from dataclasses import replace
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..config.defaults import SYSTEM_CONSTANTS
from ..exceptions import ConfigurationError, InvalidImageError, InvalidSensorError, UnknownSensorError
from ..logging_config import get_logger
from ..models.sensor import Sensor
from ..models.status import ArmingStatus
from ..security_system import SecuritySystem
from ..services.error_handler import ErrorSeverity, global_error_handler
from ..utils import decode_image_bytes

logger = get_logger("web")

EDITABLE_CONFIG_KEYS = ('sensitivity_threshold', 'fake_cat_probability')


def _ok(data: Any = None, status_code: int = 200):
    return jsonify({'success': True, 'data': data}), status_code


def _error(message: str, status_code: int):
    return jsonify({'success': False, 'error': message}), status_code


class SecurityWebApp:
    """Flask web application for the security system."""

    def __init__(self, system: Optional[SecuritySystem] = None):
        """Initialize web application."""
        self.app = Flask(__name__)
        self.system = system or SecuritySystem()
        self.service = self.system.service

        self.app.config['MAX_CONTENT_LENGTH'] = SYSTEM_CONSTANTS["MAX_UPLOAD_SIZE_MB"] * 1024 * 1024

        self._setup_error_handlers()
        self._setup_routes()

        logger.info("Security web application initialized")

    def _setup_error_handlers(self):
        """Map domain errors onto HTTP status codes."""

        @self.app.errorhandler(UnknownSensorError)
        def unknown_sensor(e):
            return _error(str(e), 404)

        @self.app.errorhandler(InvalidSensorError)
        @self.app.errorhandler(InvalidImageError)
        @self.app.errorhandler(ConfigurationError)
        def bad_request(e):
            return _error(str(e), 400)

        @self.app.errorhandler(Exception)
        def unexpected_error(e):
            if isinstance(e, HTTPException):
                return _error(e.description, e.code)
            global_error_handler.handle_error("web", e, ErrorSeverity.MEDIUM)
            return _error(str(e), 500)

    def _json_body(self) -> Optional[Dict[str, Any]]:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else None

    def _get_sensor(self, sensor_id: str) -> Sensor:
        sensor = self.system.find_sensor(sensor_id)
        if sensor is None:
            raise UnknownSensorError(f"Sensor {sensor_id} is not registered")
        return sensor

    def _setup_routes(self):
        """Setup Flask routes."""

        @self.app.route('/api/status')
        def api_status():
            """Get system status."""
            return _ok(self.system.get_status())

        @self.app.route('/api/arming', methods=['POST'])
        def api_set_arming():
            """Arm or disarm the system."""
            data = self._json_body()
            if data is None:
                return _error("Request body must be a JSON object", 400)
            name = str(data.get('status', '')).upper()
            if name not in ArmingStatus.__members__:
                return _error(f"Unknown arming status: {data.get('status')}", 400)

            self.service.set_arming_status(ArmingStatus[name])
            return _ok(self.system.get_status())

        @self.app.route('/api/sensors', methods=['GET'])
        def api_list_sensors():
            """List sensors in display order."""
            sensors = sorted(self.service.get_sensors(), key=Sensor.sort_key)
            return _ok([s.to_dict() for s in sensors])

        @self.app.route('/api/sensors', methods=['POST'])
        def api_add_sensor():
            """Register a new, inactive sensor."""
            data = self._json_body()
            if data is None:
                return _error("Request body must be a JSON object", 400)
            try:
                sensor = Sensor.from_dict({
                    'name': data['name'],
                    'sensor_type': data['sensor_type']
                })
            except KeyError as e:
                return _error(f"Missing or invalid field: {e}", 400)

            self.service.add_sensor(sensor)
            return _ok(sensor.to_dict(), 201)

        @self.app.route('/api/sensors/<sensor_id>', methods=['DELETE'])
        def api_remove_sensor(sensor_id):
            """Remove a sensor; unknown ids are ignored."""
            sensor = self.system.find_sensor(sensor_id)
            if sensor is not None:
                self.service.remove_sensor(sensor)
            return _ok({'removed': sensor is not None})

        @self.app.route('/api/sensors/<sensor_id>/activation', methods=['POST'])
        def api_change_activation(sensor_id):
            """Report a sensor's activation value."""
            sensor = self._get_sensor(sensor_id)
            data = self._json_body()
            if data is None:
                return _error("Request body must be a JSON object", 400)
            active = data.get('active')
            if not isinstance(active, bool):
                return _error("Field 'active' must be a boolean", 400)

            self.service.change_sensor_activation_status(sensor, active)
            return _ok({'sensor': sensor.to_dict(), 'status': self.system.get_status()})

        @self.app.route('/api/image', methods=['POST'])
        def api_process_image():
            """Run an uploaded camera image through the cat verdict."""
            upload = request.files.get('image')
            if upload is None:
                return _error("No image uploaded", 400)

            image = decode_image_bytes(upload.read())
            cat_detected = self.service.process_image(image)
            return _ok({'cat_detected': cat_detected, 'status': self.system.get_status()})

        @self.app.route('/api/events')
        def api_events():
            """Most recent listener events, oldest first."""
            return _ok(self.system.event_recorder.recent())

        @self.app.route('/api/config', methods=['GET'])
        def api_get_config():
            """Get the editable configuration values."""
            config = self.system.config_manager.get_config()
            return _ok({key: getattr(config, key) for key in EDITABLE_CONFIG_KEYS})

        @self.app.route('/api/config', methods=['POST'])
        def api_update_config():
            """Update editable configuration values."""
            data = self._json_body()
            if data is None:
                return _error("Request body must be a JSON object", 400)
            updates = {k: v for k, v in data.items() if k in EDITABLE_CONFIG_KEYS}
            if not updates:
                return _error("No editable configuration keys supplied", 400)

            config_manager = self.system.config_manager
            candidate = replace(config_manager.get_config(), **updates)
            if not config_manager.validate_config(candidate):
                return _error("Invalid configuration values", 400)

            config_manager.update_config(**updates)
            return _ok({k: getattr(config_manager.get_config(), k) for k in EDITABLE_CONFIG_KEYS})

    def run(self, host='0.0.0.0', port=5000, debug=False):
        """Run the Flask application."""
        logger.info(f"Starting security web interface on {host}:{port}")
        self.app.run(host=host, port=port, debug=debug, threaded=True)

    def get_app(self):
        """Get the Flask app instance for external WSGI servers."""
        return self.app


def create_app(system: Optional[SecuritySystem] = None) -> Flask:
    """Factory function to create Flask app."""
    web_app = SecurityWebApp(system)
    return web_app.get_app()
