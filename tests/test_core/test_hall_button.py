"""
Hall Call Registry Tests

- Every valid (floor, direction) pair can be pressed and queried
- Top floor UP and bottom floor DOWN do not exist
- Clearing notifies the actuator only when a lit lamp goes OFF
"""

import pytest

from elvdispatch.core.direction import Direction
from elvdispatch.core.errors import InvalidDirection, InvalidFloor, NoSuchButton
from elvdispatch.core.hall_button import HallCallRegistry
from elvdispatch.implementations.actuators import RecordingActuator

NUM_FLOORS = 5


def test_press_then_has_for_every_valid_button():
    registry = HallCallRegistry(NUM_FLOORS)
    for floor in range(NUM_FLOORS):
        if floor < NUM_FLOORS - 1:
            registry.press(floor, Direction.UP)
            assert registry.has(floor, Direction.UP)
        if floor > 0:
            registry.press(floor, Direction.DOWN)
            assert registry.has(floor, Direction.DOWN)


def test_missing_buttons_raise_no_such_button():
    registry = HallCallRegistry(NUM_FLOORS)
    with pytest.raises(NoSuchButton):
        registry.press(NUM_FLOORS - 1, Direction.UP)
    with pytest.raises(NoSuchButton):
        registry.press(0, Direction.DOWN)
    assert registry.lit_calls() == []


@pytest.mark.parametrize("floor", [-1, NUM_FLOORS, 100])
def test_out_of_range_floor(floor):
    registry = HallCallRegistry(NUM_FLOORS)
    with pytest.raises(InvalidFloor):
        registry.press(floor, Direction.UP)


@pytest.mark.parametrize("direction", [
    Direction.NEUTRAL,
    Direction.RETRIEVAL_ABOVE_GOING_UP,
    Direction.RETRIEVAL_BELOW_GOING_DOWN,
    "sideways",
])
def test_non_call_directions_are_rejected(direction):
    registry = HallCallRegistry(NUM_FLOORS)
    with pytest.raises(InvalidDirection):
        registry.press(2, direction)


def test_press_is_idempotent():
    registry = HallCallRegistry(NUM_FLOORS)
    assert registry.press(2, Direction.UP) is True
    assert registry.press(2, Direction.UP) is False
    assert registry.has(2, Direction.UP)


def test_string_directions_are_accepted():
    registry = HallCallRegistry(NUM_FLOORS)
    registry.press(3, "down")
    assert registry.has(3, Direction.DOWN)
    assert not registry.has(3, "UP")


def test_clear_notifies_once():
    actuator = RecordingActuator()
    registry = HallCallRegistry(NUM_FLOORS, actuator)
    registry.press(1, Direction.UP)

    assert registry.clear(1, Direction.UP) is True
    assert registry.clear(1, Direction.UP) is False
    assert not registry.has(1, Direction.UP)
    assert actuator.events == [("button_off", 1, "UP")]


def test_clear_unlit_button_is_silent():
    actuator = RecordingActuator()
    registry = HallCallRegistry(NUM_FLOORS, actuator)
    registry.clear(3, Direction.DOWN)
    assert actuator.events == []


def test_any_call_prefers_up():
    registry = HallCallRegistry(NUM_FLOORS)
    assert registry.any_call(2) is None
    registry.press(2, Direction.DOWN)
    assert registry.any_call(2) is Direction.DOWN
    registry.press(2, Direction.UP)
    assert registry.any_call(2) is Direction.UP
