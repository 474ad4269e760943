"""Radar (spider) chart rendering and animation for Kivy."""

__version__ = "0.1.0"
