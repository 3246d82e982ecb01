"""Orchestrators for the energy calculators."""

from .energy_orchestrator import EnergyOrchestrator

__all__ = ["EnergyOrchestrator"]
