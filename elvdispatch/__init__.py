"""
Elevator Dispatch Controller

Direction state machine and per-car stop queues for a small bank of
elevators, with a SimPy driver for scripted scenarios.
"""

__version__ = "0.1.0"

from .core.direction import Direction
from .core.errors import (
    DispatchError,
    InvalidFloor,
    InvalidElevator,
    NoSuchButton,
    InvalidDirection,
    InvalidState,
)
from .controller import Controller
from .interfaces.actuator import IActuator
from .implementations.actuators import BrokerActuator, ConsoleActuator, RecordingActuator

__all__ = [
    'Direction',
    'DispatchError',
    'InvalidFloor',
    'InvalidElevator',
    'NoSuchButton',
    'InvalidDirection',
    'InvalidState',
    'Controller',
    'IActuator',
    'BrokerActuator',
    'ConsoleActuator',
    'RecordingActuator',
]
