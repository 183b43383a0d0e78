"""
Dispatch controller

Entry points of the dispatch core: reset, hall calls, car calls and the
per-elevator dispatch cycle.
"""

from typing import List, Optional, Union

from .core.car import Car
from .core.direction import Direction, as_call_direction
from .core.errors import InvalidElevator
from .core.hall_button import HallCallRegistry
from .core.state_machine import open_doors, run_until_stop
from .implementations.actuators import ConsoleActuator
from .interfaces.actuator import IActuator


class Controller:
    """
    Dispatch controller for a bank of elevators

    Cars are driven one at a time. The caller decides the order and
    cadence of dispatch_cycle calls (e.g. round-robin once per tick).
    """
    def __init__(self, num_elevators: int = 2, num_floors: int = 5, actuator: Optional[IActuator] = None):
        """
        Args:
            num_elevators (int): Number of cars, at least 1
            num_floors (int): Number of floors, at least 2
            actuator (IActuator): Actuation boundary (default: ConsoleActuator)

        Raises:
            ValueError: If the building dimensions are invalid
        """
        if num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if num_floors < 2:
            raise ValueError("num_floors must be at least 2")

        self.num_elevators = num_elevators
        self.num_floors = num_floors
        self.actuator = actuator if actuator is not None else ConsoleActuator()
        self.hall_calls = HallCallRegistry(num_floors, self.actuator)
        self.cars: List[Car] = [Car(index=i) for i in range(num_elevators)]

    def car(self, elevator: int) -> Car:
        if not isinstance(elevator, int) or isinstance(elevator, bool) or not 0 <= elevator < self.num_elevators:
            raise InvalidElevator(f"There is no elevator {elevator} (valid: 0-{self.num_elevators - 1})")
        return self.cars[elevator]

    def reset(self):
        """Turn every button off and send every car to the bottom floor"""
        self.hall_calls.reset()
        for car in self.cars:
            self.actuator.move_to_floor(car.index, 0)
            car.reset(0)

    def press_outside(self, floor: int, direction: Union[Direction, str]) -> bool:
        """
        Register a hall call

        Returns:
            True if the button was newly lit, False if it was already lit

        Raises:
            InvalidFloor, InvalidDirection, NoSuchButton
        """
        return self.hall_calls.press(floor, as_call_direction(direction))

    def press_inside(self, elevator: int, floor: int):
        """
        Register a car call

        Raises:
            InvalidElevator, InvalidFloor
        """
        car = self.car(elevator)
        self.hall_calls.check_floor(floor)
        car.add_car_call(floor)

    def dispatch_cycle(self, elevator: int) -> Optional[int]:
        """
        Run one car until its next door cycle

        Returns:
            Floor where the doors opened, or None if the car stayed idle

        Raises:
            InvalidElevator: Unknown elevator index
            InvalidState: State machine invariant violated
        """
        car = self.car(elevator)
        if not run_until_stop(car, self.hall_calls, self.actuator):
            return None
        open_doors(car, self.hall_calls, self.actuator)
        return car.floor

    def status(self) -> dict:
        return {
            "num_floors": self.num_floors,
            "hall_calls": [(floor, direction.name) for floor, direction in self.hall_calls.lit_calls()],
            "elevators": [car.status() for car in self.cars],
        }
