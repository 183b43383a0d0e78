"""
SimPy driver for the dispatch controller

Replays scripted button presses and ticks every elevator round-robin,
publishing every actuation on the message broker.
"""

import simpy
import simpy.rt

from .analyzer.statistics import DispatchStatistics
from .config.simulation import SimulationConfig
from .controller import Controller
from .core.errors import InvalidDirection, InvalidElevator, InvalidFloor, NoSuchButton
from .implementations.actuators import BrokerActuator
from .infrastructure.message_broker import MessageBroker


def create_environment(realtime_factor: float = 0.0) -> simpy.Environment:
    """
    Plain environment for 0.0, otherwise one synchronized with the wall clock

    realtime_factor is a speed multiplier: 1.0 = realtime, 2.0 = double speed.
    """
    if realtime_factor > 0:
        return simpy.rt.RealtimeEnvironment(factor=1.0 / realtime_factor, strict=False)
    return simpy.Environment()


class DispatchSimulation:
    """
    Runs a Controller inside a SimPy environment

    Every tick_interval, calls whose time has come are pressed, then each
    elevator gets one dispatch_cycle in index order.
    """
    def __init__(self, config: SimulationConfig, env: simpy.Environment = None, verbose: bool = True):
        self.config = config
        self.env = env if env is not None else create_environment(config.realtime_factor)
        self.broker = MessageBroker(self.env, verbose=verbose)
        self.verbose = verbose
        num_elevators = config.elevator.num_elevators
        self.actuator = BrokerActuator(self.broker, num_elevators)
        self.controller = Controller(
            num_elevators=num_elevators,
            num_floors=config.building.num_floors,
            actuator=self.actuator,
        )
        self.statistics = DispatchStatistics(self.env, self.broker.get_broadcast_pipe())
        self.rejected_calls = []
        self._pending_calls = sorted(config.scenario.calls, key=lambda call: call.time)

    def _log(self, text: str):
        if self.verbose:
            print(f"{self.env.now:.2f} [Runner] {text}")

    def _press(self, call):
        try:
            if call.type == "hall":
                self.controller.press_outside(call.floor, call.direction)
                self._log(f"Hall call at floor {call.floor} ({call.direction}).")
            else:
                self.controller.press_inside(call.elevator, call.floor)
                self._log(f"Car call in Elevator_{call.elevator + 1} for floor {call.floor}.")
        except (InvalidFloor, InvalidElevator, NoSuchButton, InvalidDirection) as e:
            self.rejected_calls.append((call, str(e)))
            self._log(f"Call rejected: {e}")

    def _release_due_calls(self):
        while self._pending_calls and self._pending_calls[0].time <= self.env.now:
            self._press(self._pending_calls.pop(0))

    def run_ticks(self):
        """Main process: press due calls, then one dispatch round per tick"""
        while True:
            self._release_due_calls()
            for elevator in range(self.controller.num_elevators):
                floor = self.controller.dispatch_cycle(elevator)
                if floor is not None:
                    self._log(f"Elevator_{elevator + 1} served floor {floor}.")
            yield self.env.timeout(self.config.scenario.tick_interval)

    def run(self) -> DispatchStatistics:
        """Reset the controller and run until the scenario duration"""
        self.controller.reset()
        self.env.process(self.statistics.start_listening())
        self.env.process(self.run_ticks())
        self.env.run(until=self.config.scenario.duration)
        return self.statistics
