"""
Actuator Interface

Defines the boundary between the dispatch controller and the physical
elevator equipment (motors, doors, hall button lamps).
"""

from abc import ABC, abstractmethod

from ..core.direction import Direction


class IActuator(ABC):
    """
    Interface for elevator actuation

    The controller decides; the actuator acts. Every method is called
    exactly once per logical event: one move_one_floor per floor crossed,
    one open_door / close_door pair per stop, one notify_button_cleared
    per hall lamp switched off.

    Design Philosophy:
    - Controller state is already updated when a call arrives
    - Implementations must not call back into the controller
    - Elevator and floor arguments are 0-based indices

    Usage Examples:
    - ConsoleActuator: Print events (default)
    - BrokerActuator: Publish events on a SimPy message broker
    - RecordingActuator: Keep events in memory for inspection
    """

    @abstractmethod
    def move_one_floor(self, elevator: int, direction: Direction) -> None:
        """
        Move a car one floor

        Args:
            elevator: Elevator index
            direction: Direction.UP or Direction.DOWN
        """
        pass

    @abstractmethod
    def move_to_floor(self, elevator: int, floor: int) -> None:
        """
        Send a car straight to a floor (used only by reset)

        Args:
            elevator: Elevator index
            floor: Target floor
        """
        pass

    @abstractmethod
    def open_door(self, elevator: int) -> None:
        """Open the doors of a car at its current floor"""
        pass

    @abstractmethod
    def close_door(self, elevator: int) -> None:
        """Close the doors of a car"""
        pass

    @abstractmethod
    def notify_button_cleared(self, floor: int, direction: Direction) -> None:
        """
        Switch off a hall button lamp

        Args:
            floor: Floor of the hall button
            direction: Direction.UP or Direction.DOWN
        """
        pass
