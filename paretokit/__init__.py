"""Nondominated sets, Pareto ranking and weighted hypervolume for multi-objective data."""

__version__ = "0.1.0"
__all__ = ["cli", "dominance", "filters", "io", "ranking", "whv", "whv_hype"]