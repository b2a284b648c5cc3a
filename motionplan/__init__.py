"""Planar motion planning: polygon geometry, graphs with A* search, bug and potential-field planners, multi-agent baselines."""

__version__ = "0.1.0"