"""Portal Links Server - episode catalog with crowd-submitted streaming links."""

__version__ = "0.1.0"
