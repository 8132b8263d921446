"""Configuration management for pathgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Arc tessellation and triangulation settings
- ExportConfig: Mesh and collider export settings
- LoggingConfig: Logging settings
- PathGeomSettings: Main application settings
"""

from pathgeom.config.settings import (
    ExportConfig,
    GeometryConfig,
    LoggingConfig,
    PathGeomSettings,
    get_default_settings,
)

__all__ = [
    "ExportConfig",
    "GeometryConfig",
    "LoggingConfig",
    "PathGeomSettings",
    "get_default_settings",
]
