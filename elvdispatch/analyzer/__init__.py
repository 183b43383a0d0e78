"""
Elevator Dispatch Analyzer

Collects broker traffic and summarizes what each elevator did.
"""

from .statistics import DispatchStatistics

__all__ = ['DispatchStatistics']
