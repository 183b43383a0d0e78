"""Interfaces the dispatch core talks through"""

from .actuator import IActuator

__all__ = [
    'IActuator',
]
