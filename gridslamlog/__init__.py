"""Sensor models, CARMEN log reading, log conversion tools and numerical helpers for grid-based laser SLAM."""

__version__ = "0.1.0"