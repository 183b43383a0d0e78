"""
Dispatch core tests

Hall call registry, stop queues, car call ingestion and the
direction state machine.
"""
