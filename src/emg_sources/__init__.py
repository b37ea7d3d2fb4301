"""
EMG Signal Sources - Acquisition Abstraction Layer

This module provides a unified interface for obtaining a raw signal,
keeping the downstream filtering pipeline identical for every source.

Supported sources:
- SimulatedSource: Seeded normal noise, a stand-in for a real device
- ArraySource: Fixed samples for deterministic fixtures
- CSVSource: Recorded signals loaded from CSV files
"""
from .base_source import SignalSource
from .simulated_source import SimulatedSource
from .array_source import ArraySource
from .csv_source import CSVSource

__all__ = ['SignalSource', 'SimulatedSource', 'ArraySource', 'CSVSource']
