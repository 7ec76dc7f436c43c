"""Version information for neo-catalog."""

__version__ = "0.1.0"
