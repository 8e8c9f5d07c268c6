"""Dining philosophers simulation with threaded philosophers and a monitor."""

__version__ = "1.0.0"