"""Observability – structured logging helpers."""
from mp_caml.observability.logging.factory import JsonLoggerFactory
from mp_caml.observability.logging.processors import ComponentProcessor, get_logger

__all__ = ["ComponentProcessor", "JsonLoggerFactory", "get_logger"]
