"""Shared utilities for Doubles Rota."""

from doublesrota.utils.logging import setup_logger

__all__ = ["setup_logger"]
