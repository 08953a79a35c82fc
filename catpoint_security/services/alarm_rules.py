"""Alarm state machine rules.

Every transition of the alarm status is decided here by pure functions of
the current alarm status, the arming status and one incoming event. The
security service applies the returned :class:`AlarmDecision`; nothing in
this module touches a repository or a listener.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..models.status import AlarmStatus, ArmingStatus


class AlarmRule(Enum):
    """Names of the rules that can decide a transition."""
    SENSOR_TRIGGERED = "sensor_triggered"
    PENDING_ESCALATION = "pending_escalation"
    ALL_SENSORS_CLEAR = "all_sensors_clear"
    SENSORS_STILL_ACTIVE = "sensors_still_active"
    ALREADY_INACTIVE = "already_inactive"
    ALARM_STICKY = "alarm_sticky"
    DISARMED_COOLDOWN = "disarmed_cooldown"
    DISARMED_IGNORES_SENSORS = "disarmed_ignores_sensors"
    CAT_DETECTED = "cat_detected"
    CAT_IGNORED = "cat_ignored"
    NO_CAT_ALL_CLEAR = "no_cat_all_clear"
    NO_CAT_SENSORS_ACTIVE = "no_cat_sensors_active"
    DISARMED_RESET = "disarmed_reset"
    ARMED_RESET = "armed_reset"


@dataclass(frozen=True)
class SensorActivationEvent:
    """A sensor reported a new activation value.

    ``other_sensors_active`` covers every registered sensor except the one
    reporting.
    """
    was_active: bool
    active: bool
    other_sensors_active: bool = False


@dataclass(frozen=True)
class ImageVerdictEvent:
    """The verdict provider judged a camera image."""
    contains_cat: bool
    any_sensor_active: bool


@dataclass(frozen=True)
class ArmingEvent:
    """The arming status is being replaced.

    ``cat_detected`` is the verdict of the most recently processed image.
    """
    arming_status: ArmingStatus
    cat_detected: bool = False


SecurityEvent = Union[SensorActivationEvent, ImageVerdictEvent, ArmingEvent]


@dataclass(frozen=True)
class AlarmDecision:
    """Outcome of a rule evaluation.

    ``alarm_status`` is None when the alarm status must not be written.
    ``reset_sensors`` asks the caller to deactivate every sensor.
    """
    rule: AlarmRule
    alarm_status: Optional[AlarmStatus] = None
    reset_sensors: bool = False

    @property
    def changes_status(self) -> bool:
        return self.alarm_status is not None


def decide_sensor_activation(alarm_status: AlarmStatus,
                             arming_status: ArmingStatus,
                             event: SensorActivationEvent) -> AlarmDecision:
    """Decide the alarm status after a sensor reports ``event.active``."""
    if alarm_status is AlarmStatus.ALARM:
        # A lingering alarm on a disarmed system starts cooling down on the
        # first deactivation report, whatever the sensor's previous state.
        if arming_status is ArmingStatus.DISARMED and not event.active:
            return AlarmDecision(AlarmRule.DISARMED_COOLDOWN, AlarmStatus.PENDING_ALARM)
        return AlarmDecision(AlarmRule.ALARM_STICKY)

    if event.active:
        if not arming_status.is_armed:
            return AlarmDecision(AlarmRule.DISARMED_IGNORES_SENSORS)
        if alarm_status is AlarmStatus.NO_ALARM:
            return AlarmDecision(AlarmRule.SENSOR_TRIGGERED, AlarmStatus.PENDING_ALARM)
        return AlarmDecision(AlarmRule.PENDING_ESCALATION, AlarmStatus.ALARM)

    if not event.was_active:
        return AlarmDecision(AlarmRule.ALREADY_INACTIVE)

    if alarm_status is AlarmStatus.PENDING_ALARM and not event.other_sensors_active:
        return AlarmDecision(AlarmRule.ALL_SENSORS_CLEAR, AlarmStatus.NO_ALARM)

    return AlarmDecision(AlarmRule.SENSORS_STILL_ACTIVE)


def decide_image_verdict(alarm_status: AlarmStatus,
                         arming_status: ArmingStatus,
                         event: ImageVerdictEvent) -> AlarmDecision:
    """Decide the alarm status after an image verdict."""
    if event.contains_cat:
        if arming_status is ArmingStatus.ARMED_HOME:
            return AlarmDecision(AlarmRule.CAT_DETECTED, AlarmStatus.ALARM)
        return AlarmDecision(AlarmRule.CAT_IGNORED)

    if not event.any_sensor_active:
        return AlarmDecision(AlarmRule.NO_CAT_ALL_CLEAR, AlarmStatus.NO_ALARM)
    return AlarmDecision(AlarmRule.NO_CAT_SENSORS_ACTIVE)


def decide_arming_change(alarm_status: AlarmStatus,
                         arming_status: ArmingStatus,
                         event: ArmingEvent) -> AlarmDecision:
    """Decide the alarm status when the arming status is replaced.

    ``arming_status`` is the status being left; only the new one in
    ``event`` matters.
    """
    if event.arming_status is ArmingStatus.DISARMED:
        return AlarmDecision(AlarmRule.DISARMED_RESET, AlarmStatus.NO_ALARM)

    if event.cat_detected and event.arming_status is ArmingStatus.ARMED_HOME:
        return AlarmDecision(AlarmRule.CAT_DETECTED, AlarmStatus.ALARM, reset_sensors=True)
    return AlarmDecision(AlarmRule.ARMED_RESET, reset_sensors=True)


def decide(alarm_status: AlarmStatus,
           arming_status: ArmingStatus,
           event: SecurityEvent) -> AlarmDecision:
    """Dispatch ``event`` to the matching rule set."""
    if isinstance(event, SensorActivationEvent):
        return decide_sensor_activation(alarm_status, arming_status, event)
    if isinstance(event, ImageVerdictEvent):
        return decide_image_verdict(alarm_status, arming_status, event)
    if isinstance(event, ArmingEvent):
        return decide_arming_change(alarm_status, arming_status, event)
    raise TypeError(f"Unsupported security event: {event!r}")
