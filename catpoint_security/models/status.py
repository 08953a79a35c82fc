"""Alarm and arming status models."""

from enum import Enum
from typing import Tuple


class AlarmStatus(Enum):
    """Severity of the current alarm condition."""
    NO_ALARM = ("Cool and Good", (120, 200, 30))
    PENDING_ALARM = ("I'm in Danger...", (200, 150, 20))
    ALARM = ("Awooga!", (250, 80, 50))

    def __init__(self, description: str, color: Tuple[int, int, int]):
        self.description = description
        self.color = color


class ArmingStatus(Enum):
    """Whether the system is monitoring, and in which mode."""
    DISARMED = ("Disarmed", (120, 200, 30))
    ARMED_HOME = ("Armed - At Home", (190, 180, 50))
    ARMED_AWAY = ("Armed - Away", (170, 30, 150))

    def __init__(self, description: str, color: Tuple[int, int, int]):
        self.description = description
        self.color = color

    @property
    def is_armed(self) -> bool:
        return self is not ArmingStatus.DISARMED
