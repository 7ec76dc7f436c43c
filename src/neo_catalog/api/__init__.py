"""FastAPI integration for neo-catalog consumers."""

from .exception_handlers import neo_catalog_exception_handler, register_exception_handlers

__all__ = [
    "neo_catalog_exception_handler",
    "register_exception_handlers",
]
