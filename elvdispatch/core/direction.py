"""
Direction states of an elevator car

Above/below refers to the position of the waiting caller relative to the car,
going up/down refers to the direction the caller wants to travel.
"""

from enum import Enum
from typing import Optional, Union

from .errors import InvalidDirection


class Direction(Enum):
    """Direction state of a car (and the two hall call kinds UP/DOWN)"""
    UP = "UP"
    DOWN = "DOWN"
    NEUTRAL = "NEUTRAL"
    RETRIEVAL_ABOVE_GOING_UP = "RETRIEVAL_ABOVE_GOING_UP"
    RETRIEVAL_ABOVE_GOING_DOWN = "RETRIEVAL_ABOVE_GOING_DOWN"
    RETRIEVAL_BELOW_GOING_UP = "RETRIEVAL_BELOW_GOING_UP"
    RETRIEVAL_BELOW_GOING_DOWN = "RETRIEVAL_BELOW_GOING_DOWN"

    @property
    def is_retrieval(self) -> bool:
        return self.name.startswith("RETRIEVAL_")

    @property
    def call_class(self) -> Optional["Direction"]:
        """
        Hall button family served by a car in this state

        Returns:
            Direction.UP for UP and every *_GOING_UP retrieval,
            Direction.DOWN for DOWN and every *_GOING_DOWN retrieval,
            None for NEUTRAL
        """
        if self is Direction.NEUTRAL:
            return None
        if self is Direction.UP or self.name.endswith("_GOING_UP"):
            return Direction.UP
        return Direction.DOWN

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept a Direction member or its name ('UP', 'down', ...)"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidDirection(f"Unknown direction: {value!r}")


def as_call_direction(value: Union[Direction, str]) -> Direction:
    """
    Validate a hall call direction

    Only UP and DOWN have physical buttons; NEUTRAL and the retrieval
    states are car states, not call kinds.
    """
    direction = Direction.parse(value)
    if direction not in (Direction.UP, Direction.DOWN):
        raise InvalidDirection(
            f"There is no hall button for {direction.name}; only UP and DOWN can be called"
        )
    return direction
