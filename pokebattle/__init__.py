"""Turn-based monster battle simulator with a team editor and a terminal command."""

__version__ = "0.1.0"