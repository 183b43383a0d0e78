"""
Configuration tests

Dataclass validation and YAML loading/saving.
"""
