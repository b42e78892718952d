"""Punch Calculator - kinetic chain punch mechanics visualizer."""

__version__ = "0.1.0"
