from dataclasses import dataclass, field
from typing import Optional

from .direction import Direction
from .stop_queue import StopQueue


@dataclass
class Car:
    """
    Mutable state of one elevator car

    floor is the floor the car is on, or the floor it is heading to while
    crossing. destination is only set during a retrieval.
    """
    index: int
    floor: int = 0
    direction: Direction = Direction.NEUTRAL
    destination: Optional[int] = None
    pending_above: StopQueue = field(default_factory=StopQueue)
    pending_below: StopQueue = field(default_factory=lambda: StopQueue(descending=True))

    @property
    def name(self) -> str:
        return f"Elevator_{self.index + 1}"

    @property
    def has_pending_stops(self) -> bool:
        return bool(self.pending_above) or bool(self.pending_below)

    def reset(self, floor: int = 0):
        self.floor = floor
        self.direction = Direction.NEUTRAL
        self.destination = None
        self.pending_above.clear()
        self.pending_below.clear()

    def set_direction(self, direction: Direction, destination: Optional[int] = None):
        self.direction = direction
        self.destination = destination if direction.is_retrieval else None

    def add_car_call(self, floor: int):
        """
        Register a car call (destination button inside the car)

        A retrieval toward a caller who wants to travel against the rider's
        likely direction cannot be served sensibly with someone on board,
        so it is dropped and the car goes back to NEUTRAL first.
        """
        if self.direction in (Direction.RETRIEVAL_ABOVE_GOING_DOWN, Direction.RETRIEVAL_BELOW_GOING_UP):
            self.set_direction(Direction.NEUTRAL)

        if floor > self.floor:
            self.pending_above.push(floor)
        elif floor < self.floor:
            self.pending_below.push(floor)
        elif self.direction in (Direction.UP, Direction.RETRIEVAL_ABOVE_GOING_UP):
            self.pending_above.push(floor)
        elif self.direction in (Direction.DOWN, Direction.RETRIEVAL_BELOW_GOING_DOWN):
            self.pending_below.push(floor)
        else:
            # NEUTRAL: either way works, ties go up
            self.set_direction(Direction.UP)
            self.pending_above.push(floor)

    def status(self) -> dict:
        return {
            "elevator": self.name,
            "floor": self.floor,
            "direction": self.direction.name,
            "destination": self.destination,
            "pending_above": list(self.pending_above),
            "pending_below": list(self.pending_below),
        }
