#!/usr/bin/env python3
"""Entry point for the Catpoint security system."""

import os
import sys

from catpoint_security.config_manager import ConfigManager
from catpoint_security.exceptions import ConfigurationError
from catpoint_security.logging_config import get_logger, setup_logging
from catpoint_security.security_system import SecuritySystem
from catpoint_security.web.app import SecurityWebApp


def main(config_path=None):
    """Main entry point for the security system."""
    config_manager = ConfigManager(config_path or os.environ.get("CATPOINT_CONFIG"))
    config = config_manager.get_config()

    setup_logging(config.log_level, config.log_dir)
    logger = get_logger("start_security")
    logger.info("Starting Catpoint security system")
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Configuration file: {config_manager.config_path}")

    try:
        system = SecuritySystem(config_manager)
    except ConfigurationError as e:
        logger.error(f"Security system failed to start: {e}")
        return 1

    web_app = SecurityWebApp(system)
    try:
        web_app.run(host=config.web_host, port=config.web_port)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")

    return 0


if __name__ == "__main__":
    sys.exit(main())
