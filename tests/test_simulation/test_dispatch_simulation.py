"""
Dispatch Simulation Tests

Runs the SimPy driver on small scripted scenarios and checks what the
statistics recorder saw on the broker.
"""

from pathlib import Path

import simpy

from elvdispatch.config import BuildingConfig, CallEvent, ElevatorConfig, ScenarioConfig, SimulationConfig
from elvdispatch.core.direction import Direction
from elvdispatch.implementations.actuators import BrokerActuator
from elvdispatch.infrastructure.message_broker import MessageBroker
from elvdispatch.main import main
from elvdispatch.simulation import DispatchSimulation

DEFAULT_SCENARIO = Path(__file__).parent.parent.parent / "scenarios" / "default.yaml"


def make_config(num_floors=2, num_elevators=1, calls=(), duration=5.0):
    return SimulationConfig(
        building=BuildingConfig(num_floors=num_floors),
        elevator=ElevatorConfig(num_elevators=num_elevators),
        scenario=ScenarioConfig(tick_interval=1.0, duration=duration, calls=list(calls)),
    )


def test_single_down_call_is_served():
    config = make_config(calls=[CallEvent(time=0, type="hall", floor=1, direction="DOWN")])
    simulation = DispatchSimulation(config, verbose=False)
    statistics = simulation.run()

    summary = statistics.summary()
    assert summary["elevators"]["Elevator_1"] == {"floors_travelled": 1, "door_openings": 1}
    assert summary["hall_calls_served"] == 1
    assert statistics.door_openings["Elevator_1"] == [(0, 1)]
    assert statistics.hall_call_off_history == [(0, 1, "DOWN")]
    assert not simulation.controller.hall_calls.has(1, Direction.DOWN)


def test_calls_wait_for_their_time():
    config = make_config(num_floors=4, calls=[CallEvent(time=2.5, type="hall", floor=3, direction="DOWN")])
    simulation = DispatchSimulation(config, verbose=False)
    statistics = simulation.run()

    # Pressed at 2.5, picked up by the dispatch round at 3.0
    assert statistics.door_openings["Elevator_1"] == [(3.0, 3)]
    assert statistics.floors_travelled["Elevator_1"] == 3


def test_car_calls_are_replayed():
    config = make_config(num_floors=5, num_elevators=2, calls=[
        CallEvent(time=0, type="car", floor=4, elevator=1),
        CallEvent(time=1, type="car", floor=2, elevator=1),
    ])
    statistics = DispatchSimulation(config, verbose=False).run()

    # Time 0: floor 4 only; time 1: car 2 is at 4, floor 2 is below
    assert [floor for _, floor in statistics.door_openings["Elevator_2"]] == [4, 2]
    assert "Elevator_1" not in statistics.door_openings


def test_impossible_call_is_rejected_and_skipped():
    config = make_config(num_floors=3, calls=[
        CallEvent(time=0, type="hall", floor=2, direction="UP"),
        CallEvent(time=0, type="hall", floor=2, direction="DOWN"),
    ])
    simulation = DispatchSimulation(config, verbose=False)
    statistics = simulation.run()

    assert len(simulation.rejected_calls) == 1
    assert simulation.rejected_calls[0][0].direction == "UP"
    assert statistics.summary()["hall_calls_served"] == 1


def test_reset_is_published_for_every_elevator():
    config = make_config(num_elevators=3)
    statistics = DispatchSimulation(config, verbose=False).run()
    reset_topics = [event["topic"] for event in statistics.event_log if event["topic"].endswith("/reset")]
    assert reset_topics == [f"elevator/Elevator_{i}/reset" for i in (1, 2, 3)]


def test_broker_actuator_messages():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    actuator = BrokerActuator(broker, num_elevators=1)
    pipe = broker.get_pipe("elevator/Elevator_1/door_events")

    actuator.move_one_floor(0, Direction.UP)
    actuator.open_door(0)
    actuator.notify_button_cleared(1, Direction.UP)

    assert actuator.floors == [1]
    assert pipe.items == [{
        "elevator_name": "Elevator_1",
        "event_type": "OPEN",
        "floor": 1,
        "timestamp": 0,
    }]
    assert len(broker.get_broadcast_pipe().items) == 3


def test_cli_runs_default_scenario(capsys):
    assert main(["--quiet", str(DEFAULT_SCENARIO)]) == 0
    output = capsys.readouterr().out
    assert "DISPATCH SUMMARY" in output
    assert "Elevator_1" in output


def test_cli_reports_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_long_run_leaves_no_unread_messages():
    calls = [CallEvent(time=2.0 * i, type="hall", floor=4, direction="DOWN") for i in range(200)]
    config = make_config(num_floors=5, calls=calls, duration=400.0)
    simulation = DispatchSimulation(config, verbose=False)
    statistics = simulation.run()

    assert statistics.summary()["hall_calls_served"] > 0
    assert simulation.broker.topics == {}
    assert simulation.broker.get_broadcast_pipe().items == []


def test_subscribed_topic_receives_later_messages():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    broker.put("hall_button/floor_1/call_off", {"floor": 1})
    received = []

    def subscriber():
        while True:
            message = yield broker.get("hall_button/floor_2/call_off")
            received.append(message)

    env.process(subscriber())
    env.run(until=1)
    broker.put("hall_button/floor_2/call_off", {"floor": 2})
    broker.put("hall_button/floor_3/call_off", {"floor": 3})
    env.run(until=2)

    assert received == [{"floor": 2}]
    assert list(broker.topics) == ["hall_button/floor_2/call_off"]
    assert len(broker.get_broadcast_pipe().items) == 3
