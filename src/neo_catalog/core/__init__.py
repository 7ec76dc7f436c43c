"""Core layer shared by all neo-catalog platform modules."""

from .exceptions import *  # noqa: F401,F403
