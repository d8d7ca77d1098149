"""Solvers for the 2024 puzzle calendar, one module per available day, with a command line entry point."""

__version__ = "0.1.0"