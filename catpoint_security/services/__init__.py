"""Services for the security system."""

from .interfaces import (
    SecurityRepositoryInterface,
    ImageServiceInterface,
    StatusListener
)
from .alarm_rules import AlarmRule, AlarmDecision
from .repository import InMemorySecurityRepository
from .image_service import FakeImageService, StaticImageService
from .security_service import SecurityService

__all__ = [
    'SecurityRepositoryInterface',
    'ImageServiceInterface',
    'StatusListener',
    'AlarmRule',
    'AlarmDecision',
    'InMemorySecurityRepository',
    'FakeImageService',
    'StaticImageService',
    'SecurityService'
]
