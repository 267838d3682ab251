"""Coordinators - orchestrate the archive, encoder and posting services."""

from .post_cycle_coordinator import CycleResult, PostCycleCoordinator

__all__ = ["PostCycleCoordinator", "CycleResult"]
