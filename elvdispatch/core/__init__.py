"""Core dispatch entities"""

from .errors import (
    DispatchError,
    InvalidFloor,
    InvalidElevator,
    NoSuchButton,
    InvalidDirection,
    InvalidState,
)
from .direction import Direction
from .stop_queue import StopQueue
from .car import Car
from .hall_button import HallCallRegistry
from .state_machine import Action, Decision, decide, apply_decision, run_until_stop, open_doors

__all__ = [
    'DispatchError',
    'InvalidFloor',
    'InvalidElevator',
    'NoSuchButton',
    'InvalidDirection',
    'InvalidState',
    'Direction',
    'StopQueue',
    'Car',
    'HallCallRegistry',
    'Action',
    'Decision',
    'decide',
    'apply_decision',
    'run_until_stop',
    'open_doors',
]
