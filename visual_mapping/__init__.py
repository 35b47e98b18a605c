"""
Graph Visual Mapping — core package.

Public API:
    VisualMappingEngine – facade: GraphData → backend render properties
    RenderResult        – output of one render call
    ThemeToggle         – dark-mode toggle state for the host UI
    EngineConfig        – top-level configuration
    MappingConfig       – size range, thresholds, theme palettes
    EngineSettings      – host UI settings (locale, defaults)
"""
from .config import (
    EngineConfig,
    MappingConfig,
    EngineSettings,
    load_settings,
    load_mapping_config,
)
from .engine import (
    VisualMappingEngine,
    RenderResult,
    ThemeToggle,
    open_github_profile,
)

__all__ = [
    'VisualMappingEngine',
    'RenderResult',
    'ThemeToggle',
    'open_github_profile',
    'EngineConfig',
    'MappingConfig',
    'EngineSettings',
    'load_settings',
    'load_mapping_config',
]
