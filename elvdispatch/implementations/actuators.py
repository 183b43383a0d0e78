"""
Actuator implementations

ConsoleActuator prints, BrokerActuator publishes on the SimPy message
broker, RecordingActuator keeps an in-memory event list.
"""

from typing import List, Tuple

from ..core.direction import Direction
from ..interfaces.actuator import IActuator


def elevator_name(elevator: int) -> str:
    return f"Elevator_{elevator + 1}"


class ConsoleActuator(IActuator):
    """Prints every actuation event"""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def _print(self, text: str):
        if self.verbose:
            print(text)

    def move_one_floor(self, elevator: int, direction: Direction) -> None:
        self._print(f"[{elevator_name(elevator)}] Moving one floor {direction.name}.")

    def move_to_floor(self, elevator: int, floor: int) -> None:
        self._print(f"[{elevator_name(elevator)}] Sent to floor {floor}.")

    def open_door(self, elevator: int) -> None:
        self._print(f"[{elevator_name(elevator)}] Door opened.")

    def close_door(self, elevator: int) -> None:
        self._print(f"[{elevator_name(elevator)}] Door closed.")

    def notify_button_cleared(self, floor: int, direction: Direction) -> None:
        self._print(f"[HallButton] Call served at floor {floor} ({direction.name}). Light OFF.")


class RecordingActuator(IActuator):
    """
    Keeps every actuation event in order

    Events are tuples: ('move', elevator, 'UP'|'DOWN'), ('move_to', elevator, floor),
    ('open', elevator), ('close', elevator), ('button_off', floor, 'UP'|'DOWN').
    Floors are tracked per elevator from the move events.
    """

    def __init__(self):
        self.events: List[Tuple] = []
        self.floors = {}

    def move_one_floor(self, elevator: int, direction: Direction) -> None:
        self.events.append(("move", elevator, direction.name))
        step = 1 if direction is Direction.UP else -1
        self.floors[elevator] = self.floors.get(elevator, 0) + step

    def move_to_floor(self, elevator: int, floor: int) -> None:
        self.events.append(("move_to", elevator, floor))
        self.floors[elevator] = floor

    def open_door(self, elevator: int) -> None:
        self.events.append(("open", elevator))

    def close_door(self, elevator: int) -> None:
        self.events.append(("close", elevator))

    def notify_button_cleared(self, floor: int, direction: Direction) -> None:
        self.events.append(("button_off", floor, direction.name))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [event for event in self.events if event[0] == kind]

    def clear(self):
        self.events.clear()


class BrokerActuator(IActuator):
    """
    Publishes actuation events on a MessageBroker

    Topics:
        elevator/<name>/move          {'direction', 'floor'}
        elevator/<name>/reset         {'floor'}
        elevator/<name>/door_events   {'event_type': 'OPEN'|'CLOSE', 'floor'}
        hall_button/floor_<n>/call_off {'floor', 'direction', 'action': 'OFF'}

    Every message carries the simulation time under 'timestamp'. Floors
    are tracked here from the move events.
    """

    def __init__(self, broker, num_elevators: int):
        self.broker = broker
        self.floors = [0] * num_elevators

    def _publish(self, topic: str, message: dict):
        message["timestamp"] = self.broker.get_current_time()
        self.broker.put(topic, message)

    def move_one_floor(self, elevator: int, direction: Direction) -> None:
        self.floors[elevator] += 1 if direction is Direction.UP else -1
        self._publish(f"elevator/{elevator_name(elevator)}/move", {
            "elevator_name": elevator_name(elevator),
            "direction": direction.name,
            "floor": self.floors[elevator],
        })

    def move_to_floor(self, elevator: int, floor: int) -> None:
        self.floors[elevator] = floor
        self._publish(f"elevator/{elevator_name(elevator)}/reset", {
            "elevator_name": elevator_name(elevator),
            "floor": floor,
        })

    def _door_event(self, elevator: int, event_type: str):
        self._publish(f"elevator/{elevator_name(elevator)}/door_events", {
            "elevator_name": elevator_name(elevator),
            "event_type": event_type,
            "floor": self.floors[elevator],
        })

    def open_door(self, elevator: int) -> None:
        self._door_event(elevator, "OPEN")

    def close_door(self, elevator: int) -> None:
        self._door_event(elevator, "CLOSE")

    def notify_button_cleared(self, floor: int, direction: Direction) -> None:
        self._publish(f"hall_button/floor_{floor}/call_off", {
            "floor": floor,
            "direction": direction.name,
            "action": "OFF",
        })
