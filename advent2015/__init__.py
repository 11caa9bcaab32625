"""Solvers for the 2015 holiday puzzle calendar, days 12 to 25."""

__version__ = "1.0.0"