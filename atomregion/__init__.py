"""Geometric volumes and simulation-region bookkeeping for atom simulations."""

__version__ = "0.1.0"
__all__ = ["shapes", "sim_region"]