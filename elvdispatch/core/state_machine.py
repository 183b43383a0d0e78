"""
Direction state machine

decide() looks at one car and the hall calls and returns what the car
should do next, without changing anything. run_until_stop() applies those
decisions one at a time until the car has to open its doors or has nothing
left to do. open_doors() then serves the floor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .car import Car
from .direction import Direction
from .errors import InvalidState
from .hall_button import HallCallRegistry


class Action(Enum):
    ADVANCE = "ADVANCE"   # move one floor in Decision.direction
    SWITCH = "SWITCH"     # change direction (and destination for a retrieval)
    OPEN = "OPEN"         # stop here; Decision.direction set when a retrieval completes
    ABANDON = "ABANDON"   # caller no longer waiting, back to NEUTRAL
    IDLE = "IDLE"         # nothing to do anywhere


@dataclass(frozen=True)
class Decision:
    action: Action
    direction: Optional[Direction] = None
    destination: Optional[int] = None


ADVANCE_UP = Decision(Action.ADVANCE, Direction.UP)
ADVANCE_DOWN = Decision(Action.ADVANCE, Direction.DOWN)
OPEN_HERE = Decision(Action.OPEN)
ABANDON = Decision(Action.ABANDON)
IDLE = Decision(Action.IDLE)


def _decide_up(car: Car, calls: HallCallRegistry) -> Decision:
    floor = car.floor
    if calls.up_button[floor] or car.pending_above.top_equals(floor):
        return OPEN_HERE
    if not car.pending_above:
        return Decision(Action.SWITCH, Direction.NEUTRAL)
    return ADVANCE_UP


def _decide_down(car: Car, calls: HallCallRegistry) -> Decision:
    floor = car.floor
    if calls.down_button[floor] or car.pending_below.top_equals(floor):
        return OPEN_HERE
    if not car.pending_below:
        return Decision(Action.SWITCH, Direction.NEUTRAL)
    return ADVANCE_DOWN


def _decide_retrieval_above_going_up(car: Car, calls: HallCallRegistry) -> Decision:
    # Travelling with the caller's direction: riders and same-direction
    # callers on the way are served too.
    floor = car.floor
    at_destination = car.destination == floor
    if calls.up_button[floor] or at_destination or car.pending_above.top_equals(floor):
        return Decision(Action.OPEN, Direction.UP) if at_destination else OPEN_HERE
    if not calls.up_button[car.destination]:
        return ABANDON
    return ADVANCE_UP


def _decide_retrieval_below_going_down(car: Car, calls: HallCallRegistry) -> Decision:
    floor = car.floor
    at_destination = car.destination == floor
    if calls.down_button[floor] or at_destination or car.pending_below.top_equals(floor):
        return Decision(Action.OPEN, Direction.DOWN) if at_destination else OPEN_HERE
    if not calls.down_button[car.destination]:
        return ABANDON
    return ADVANCE_DOWN


def _decide_retrieval_below_going_up(car: Car, calls: HallCallRegistry) -> Decision:
    # Travelling against the caller's direction: no stops on the way.
    if not calls.up_button[car.destination]:
        return ABANDON
    if car.destination == car.floor:
        return Decision(Action.OPEN, Direction.UP)
    return ADVANCE_DOWN


def _decide_retrieval_above_going_down(car: Car, calls: HallCallRegistry) -> Decision:
    if not calls.down_button[car.destination]:
        return ABANDON
    if car.destination == car.floor:
        return Decision(Action.OPEN, Direction.DOWN)
    return ADVANCE_UP


def _retrieval_for(call: Direction, caller_floor: int, car_floor: int) -> Decision:
    if caller_floor >= car_floor:
        direction = (Direction.RETRIEVAL_ABOVE_GOING_UP if call is Direction.UP
                     else Direction.RETRIEVAL_ABOVE_GOING_DOWN)
    else:
        direction = (Direction.RETRIEVAL_BELOW_GOING_UP if call is Direction.UP
                     else Direction.RETRIEVAL_BELOW_GOING_DOWN)
    return Decision(Action.SWITCH, direction, caller_floor)


def _decide_neutral(car: Car, calls: HallCallRegistry) -> Decision:
    if car.has_pending_stops:
        if len(car.pending_above) >= len(car.pending_below):
            return Decision(Action.SWITCH, Direction.UP)
        return Decision(Action.SWITCH, Direction.DOWN)

    floor = car.floor
    # Caller already at the doors
    call = calls.any_call(floor)
    if call is Direction.UP:
        return Decision(Action.SWITCH, Direction.RETRIEVAL_ABOVE_GOING_UP, floor)
    if call is Direction.DOWN:
        return Decision(Action.SWITCH, Direction.RETRIEVAL_BELOW_GOING_DOWN, floor)

    # Nearest waiting caller, floors above win ties
    for distance in range(1, calls.num_floors):
        above = floor + distance
        if above < calls.num_floors:
            call = calls.any_call(above)
            if call is not None:
                return _retrieval_for(call, above, floor)
        below = floor - distance
        if below >= 0:
            call = calls.any_call(below)
            if call is not None:
                return _retrieval_for(call, below, floor)
    return IDLE


_DECIDERS = {
    Direction.UP: _decide_up,
    Direction.DOWN: _decide_down,
    Direction.NEUTRAL: _decide_neutral,
    Direction.RETRIEVAL_ABOVE_GOING_UP: _decide_retrieval_above_going_up,
    Direction.RETRIEVAL_ABOVE_GOING_DOWN: _decide_retrieval_above_going_down,
    Direction.RETRIEVAL_BELOW_GOING_UP: _decide_retrieval_below_going_up,
    Direction.RETRIEVAL_BELOW_GOING_DOWN: _decide_retrieval_below_going_down,
}


def decide(car: Car, calls: HallCallRegistry) -> Decision:
    """Next step for a car; pure, does not modify car or calls"""
    return _DECIDERS[car.direction](car, calls)


def apply_decision(car: Car, decision: Decision, calls: HallCallRegistry, actuator) -> None:
    """
    Apply one non-terminal decision (ADVANCE, SWITCH or ABANDON)

    Raises:
        InvalidState: If the car would leave the shaft, or the decision is OPEN/IDLE
    """
    if decision.action is Action.ADVANCE:
        step = 1 if decision.direction is Direction.UP else -1
        target = car.floor + step
        if not 0 <= target < calls.num_floors:
            raise InvalidState(f"{car.name} cannot move {decision.direction.name} from floor {car.floor}")
        car.floor = target
        actuator.move_one_floor(car.index, decision.direction)
    elif decision.action is Action.SWITCH:
        car.set_direction(decision.direction, decision.destination)
    elif decision.action is Action.ABANDON:
        car.set_direction(Direction.NEUTRAL)
    else:
        raise InvalidState(f"{decision.action.name} is not a step decision")


def run_until_stop(car: Car, calls: HallCallRegistry, actuator) -> bool:
    """
    Drive a car floor by floor until it must open its doors

    Returns:
        True if the car stopped to open at car.floor,
        False if it has nothing to serve and stays NEUTRAL
    """
    while True:
        decision = decide(car, calls)
        if decision.action is Action.OPEN:
            if decision.direction is not None:
                car.set_direction(decision.direction)
            return True
        if decision.action is Action.IDLE:
            return False
        apply_decision(car, decision, calls, actuator)


def open_doors(car: Car, calls: HallCallRegistry, actuator) -> None:
    """
    Door cycle at the current floor

    Serves one car call per pending queue and the hall call matching the
    car's direction class, between open_door and close_door.
    """
    call_class = car.direction.call_class
    if call_class is None:
        raise InvalidState(f"{car.name} cannot open its doors while NEUTRAL")

    floor = car.floor
    actuator.open_door(car.index)
    car.pending_above.pop_if_equal(floor)
    car.pending_below.pop_if_equal(floor)
    calls.clear(floor, call_class)
    actuator.close_door(car.index)
