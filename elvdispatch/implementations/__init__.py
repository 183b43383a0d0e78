"""Actuator implementations"""

from .actuators import BrokerActuator, ConsoleActuator, RecordingActuator

__all__ = [
    'BrokerActuator',
    'ConsoleActuator',
    'RecordingActuator',
]
