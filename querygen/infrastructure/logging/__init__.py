"""Logging helpers."""

from querygen.infrastructure.logging.logger import StructuredLogger

__all__ = ["StructuredLogger"]
