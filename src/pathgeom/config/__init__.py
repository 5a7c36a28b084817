"""Configuration management for pathgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CurveConfig: Curve tessellation and primitive sampling settings
- ConversionConfig: Outer ring policy and nesting depth cap
- StyleConfig: Default style of encoded shapes
- LoggingConfig: Logging settings
- PathgeomSettings: Main application settings
"""

from pathgeom.config.settings import (
    ConversionConfig,
    CurveConfig,
    LoggingConfig,
    OuterRingPolicy,
    PathgeomSettings,
    StyleConfig,
)

__all__ = [
    "ConversionConfig",
    "CurveConfig",
    "LoggingConfig",
    "OuterRingPolicy",
    "PathgeomSettings",
    "StyleConfig",
]
