# Multi-algorithm comparison harness

from .session import AlgorithmSelection, ComparisonSession, ComparisonState

__all__ = ["AlgorithmSelection", "ComparisonSession", "ComparisonState"]
