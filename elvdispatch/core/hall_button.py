from typing import List, Optional, Union

from .direction import Direction, as_call_direction
from .errors import InvalidFloor, NoSuchButton


class HallCallRegistry:
    """
    Hall call buttons of every floor (UP/DOWN lamp state)

    The top floor has no UP button and the bottom floor has no DOWN button;
    those lamps can never be lit.
    """
    def __init__(self, num_floors: int, actuator=None):
        """
        Args:
            num_floors (int): Number of floors served
            actuator (IActuator): Receives notify_button_cleared when a lit lamp goes OFF
        """
        self.num_floors = num_floors
        self.actuator = actuator
        self.up_button: List[bool] = [False] * num_floors
        self.down_button: List[bool] = [False] * num_floors

    def _buttons(self, direction: Direction) -> List[bool]:
        return self.up_button if direction is Direction.UP else self.down_button

    def check_floor(self, floor: int):
        if not isinstance(floor, int) or isinstance(floor, bool) or not 0 <= floor < self.num_floors:
            raise InvalidFloor(f"There is no floor {floor} (valid: 0-{self.num_floors - 1})")

    def press(self, floor: int, direction: Union[Direction, str]) -> bool:
        """
        Process when a hall button is pressed

        Returns:
            True if the lamp was switched ON, False if it was already lit
        """
        self.check_floor(floor)
        direction = as_call_direction(direction)
        if direction is Direction.UP and floor == self.num_floors - 1:
            raise NoSuchButton("There is no UP button on the top floor")
        if direction is Direction.DOWN and floor == 0:
            raise NoSuchButton("There is no DOWN button on the bottom floor")

        buttons = self._buttons(direction)
        if buttons[floor]:
            return False
        buttons[floor] = True
        return True

    def clear(self, floor: int, direction: Union[Direction, str]) -> bool:
        """
        Process when a call is served (turn off light)

        Returns:
            True if a lit lamp was switched OFF
        """
        self.check_floor(floor)
        direction = as_call_direction(direction)
        buttons = self._buttons(direction)
        if not buttons[floor]:
            return False
        buttons[floor] = False
        if self.actuator is not None:
            self.actuator.notify_button_cleared(floor, direction)
        return True

    def has(self, floor: int, direction: Union[Direction, str]) -> bool:
        self.check_floor(floor)
        return self._buttons(as_call_direction(direction))[floor]

    def any_call(self, floor: int) -> Optional[Direction]:
        """Direction of a lit call at a floor, preferring UP when both are lit"""
        if self.up_button[floor]:
            return Direction.UP
        if self.down_button[floor]:
            return Direction.DOWN
        return None

    def reset(self):
        """Switch every lamp OFF without notifications"""
        for floor in range(self.num_floors):
            self.up_button[floor] = False
            self.down_button[floor] = False

    def lit_calls(self) -> List[tuple]:
        """All lit calls as (floor, Direction) pairs, bottom floor first"""
        calls = []
        for floor in range(self.num_floors):
            if self.up_button[floor]:
                calls.append((floor, Direction.UP))
            if self.down_button[floor]:
                calls.append((floor, Direction.DOWN))
        return calls
