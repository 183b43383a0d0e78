"""
Simulation Configuration

Building dimensions for the dispatch controller plus the scripted calls
the simulation runner replays against it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 5

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Elevator bank specifications"""
    num_elevators: int = 2

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")


@dataclass
class CallEvent:
    """
    A scripted button press

    type 'hall': hall button at floor, direction 'UP' or 'DOWN'
    type 'car': car button for floor inside elevator (0-based index)
    """
    time: float
    type: str
    floor: int
    direction: Optional[str] = None
    elevator: Optional[int] = None

    def __post_init__(self):
        if self.time < 0:
            raise ValueError("call time cannot be negative")
        if self.type not in ["hall", "car"]:
            raise ValueError(f"call type must be 'hall' or 'car', got {self.type!r}")
        if self.type == "hall":
            if self.direction is None:
                raise ValueError("hall calls need a direction")
            self.direction = str(self.direction).upper()
            if self.direction not in ["UP", "DOWN"]:
                raise ValueError("hall call direction must be 'UP' or 'DOWN'")
        if self.type == "car" and self.elevator is None:
            raise ValueError("car calls need an elevator index")

    def to_dict(self) -> Dict[str, Any]:
        result = {'time': self.time, 'type': self.type, 'floor': self.floor}
        if self.type == "hall":
            result['direction'] = self.direction
        else:
            result['elevator'] = self.elevator
        return result


@dataclass
class ScenarioConfig:
    """Timing of the run and the calls to replay"""
    tick_interval: float = 1.0  # seconds between dispatch rounds
    duration: float = 60.0  # seconds
    calls: List[CallEvent] = field(default_factory=list)

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.duration <= 0:
            raise ValueError("duration must be positive")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator and scenario settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)

    # Simulation control
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = (data or {}).get('simulation', data or {})

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 5)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 2)
        )

        scenario_data = sim_data.get('scenario', {})
        scenario = ScenarioConfig(
            tick_interval=scenario_data.get('tick_interval', 1.0),
            duration=scenario_data.get('duration', 60.0),
            calls=[
                CallEvent(
                    time=call.get('time', 0.0),
                    type=call.get('type', 'hall'),
                    floor=call['floor'],
                    direction=call.get('direction'),
                    elevator=call.get('elevator'),
                )
                for call in scenario_data.get('calls', [])
            ]
        )

        return cls(
            building=building,
            elevator=elevator,
            scenario=scenario,
            realtime_factor=sim_data.get('realtime_factor', 0.0)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators
                },
                'scenario': {
                    'tick_interval': self.scenario.tick_interval,
                    'duration': self.scenario.duration,
                    'calls': [call.to_dict() for call in self.scenario.calls]
                },
                'realtime_factor': self.realtime_factor
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        num_floors = self.building.num_floors
        for call in self.scenario.calls:
            if not 0 <= call.floor < num_floors:
                raise ValueError(f"call floor ({call.floor}) must be between 0 and {num_floors - 1}")
            if call.type == "car" and not 0 <= call.elevator < self.elevator.num_elevators:
                raise ValueError(
                    f"call elevator ({call.elevator}) must be between 0 and {self.elevator.num_elevators - 1}"
                )
