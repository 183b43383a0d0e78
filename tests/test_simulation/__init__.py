"""
Simulation tests

SimPy runner, broker actuator, statistics and the command line entry point.
"""
