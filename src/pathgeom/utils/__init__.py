"""Utility functions for pathgeom.

This module provides logging setup and conversion statistics.
"""

from pathgeom.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
