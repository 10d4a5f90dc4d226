"""Simulated annealing for the no-wait two-machine flow shop with downtimes."""

__version__ = "0.1.0"

__all__ = ["annealing", "averages", "experiment", "model"]