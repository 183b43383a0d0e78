"""
Configuration management package

Provides configuration classes for the dispatch simulation.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    ScenarioConfig,
    CallEvent
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'ScenarioConfig',
    'CallEvent',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
