"""Utility helpers shared across the *mazeevo* codebase."""
from __future__ import annotations

from mazeevo.utils.ascii import render_ascii
from mazeevo.utils.logger_setup import setup_logger

__all__ = ["render_ascii", "setup_logger"]
