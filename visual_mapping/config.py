"""
    Engine configuration — size range, thresholds, theme palettes, settings.

    Every configuration object is immutable so that two invocations with
    the same input always see the same constants.  ``EngineSettings``
    mirrors the user settings of the host UI and has usable defaults, so
    the engine can run before (or without) loading a settings file.
"""
import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from mapping_api.types import GraphType, Theme, ValueCoercer

from .services.exceptions import MappingConfigError

logger = logging.getLogger(__name__)

DEFAULT_NODE_SIZE: Tuple[float, float] = (10, 30)
DEFAULT_THRESHOLDS: Tuple[float, ...] = (10, 100, 1000)

LIGHT_PALETTE: Tuple[str, ...] = ('#9EB9A8', '#40C463', '#30A14E', '#216E39')
DARK_PALETTE: Tuple[str, ...] = ('#0E4429', '#006D32', '#26A641', '#39D353')

DEFAULT_PALETTES: Mapping[Theme, Tuple[str, ...]] = MappingProxyType({
    Theme.LIGHT: LIGHT_PALETTE,
    Theme.DARK: DARK_PALETTE,
})

# Used when a palette is empty and there is no overflow entry to fall back to
NEUTRAL_COLOR = '#999999'

DEFAULT_EDGE_POLY_DISTANCE = 40

SUPPORTED_LOCALES = ('en', 'zh_CN')


def _palette_theme(key: Any) -> Theme:
    """Theme of a palette key; unknown names are rejected, not remapped."""
    if isinstance(key, Theme):
        return key
    try:
        return Theme(key)
    except ValueError:
        raise MappingConfigError(f"Unknown theme in 'palettes': {key}")


@dataclass(frozen=True)
class MappingConfig:
    """
    Constants of the visual mapping.

    Attributes:
        node_size:          ``(min_output, max_output)`` of node sizes.
        thresholds:         Ascending color bucket breakpoints.
        palettes:           Theme → colors, ``len(thresholds) + 1`` each.
        edge_poly_distance: Curvature distance of node-link polyline edges.
    """
    node_size: Tuple[float, float] = DEFAULT_NODE_SIZE
    thresholds: Tuple[float, ...] = DEFAULT_THRESHOLDS
    palettes: Mapping[Theme, Tuple[str, ...]] = field(default_factory=lambda: DEFAULT_PALETTES)
    edge_poly_distance: float = DEFAULT_EDGE_POLY_DISTANCE

    def __post_init__(self):
        object.__setattr__(self, 'node_size', tuple(self.node_size))
        object.__setattr__(self, 'thresholds', tuple(self.thresholds))
        object.__setattr__(self, 'palettes', MappingProxyType(
            {_palette_theme(k): tuple(v) for k, v in self.palettes.items()}
        ))

    def palette_for(self, theme: Theme) -> Tuple[str, ...]:
        """Return the palette of a theme (LIGHT when the theme has none)."""
        return self.palettes.get(theme, self.palettes.get(Theme.LIGHT, ()))

    def __hash__(self) -> int:
        return hash((self.node_size, self.thresholds,
                     tuple(sorted((t.value, p) for t, p in self.palettes.items())),
                     self.edge_poly_distance))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MappingConfig':
        """
        Build a config from a plain dictionary, keeping defaults for
        missing keys.

        Palette *length* is not validated here: a palette that does not
        match the threshold table is a soft error handled by the
        color bucketizer.

        Raises:
            MappingConfigError: On wrong shapes or non-numeric values.
        """
        if not isinstance(data, Mapping):
            raise MappingConfigError("Mapping config must be an object.")

        config = cls()
        try:
            if 'node_size' in data:
                size = [ValueCoercer.to_number(v) for v in data['node_size']]
                if len(size) != 2:
                    raise MappingConfigError("'node_size' must have exactly two entries.")
                config = replace(config, node_size=tuple(size))

            if 'thresholds' in data:
                thresholds = tuple(ValueCoercer.to_number(v) for v in data['thresholds'])
                if list(thresholds) != sorted(thresholds):
                    raise MappingConfigError("'thresholds' must be in ascending order.")
                config = replace(config, thresholds=thresholds)

            if 'palettes' in data:
                raw = data['palettes']
                if not isinstance(raw, Mapping):
                    raise MappingConfigError("'palettes' must map theme names to color lists.")
                palettes = dict(config.palettes)
                for theme_name, colors in raw.items():
                    palettes[_palette_theme(theme_name)] = tuple(str(c) for c in colors)
                config = replace(config, palettes=palettes)

            if 'edge_poly_distance' in data:
                config = replace(
                    config,
                    edge_poly_distance=ValueCoercer.to_number(data['edge_poly_distance']),
                )
        except MappingConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise MappingConfigError(f"Invalid mapping config: {e}")

        return config


@dataclass(frozen=True)
class EngineSettings:
    """
    User-facing settings of the host UI.

    Attributes:
        locale:             Message locale for UI labels.
        default_theme:      Theme used when the caller passes none.
        default_graph_type: Backend used when the caller passes none.
    """
    locale: str = 'en'
    default_theme: Theme = Theme.LIGHT
    default_graph_type: GraphType = GraphType.FORCE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EngineSettings':
        settings = cls()
        if not isinstance(data, Mapping):
            logger.warning("Settings must be an object, using defaults.")
            return settings

        locale = data.get('locale', settings.locale)
        if locale not in SUPPORTED_LOCALES:
            logger.warning("Unsupported locale %r, using '%s'.", locale, settings.locale)
            locale = settings.locale

        theme = settings.default_theme
        if 'default_theme' in data:
            theme = Theme.parse(data['default_theme'])

        graph_type = settings.default_graph_type
        if 'default_graph_type' in data:
            parsed = GraphType.parse(data['default_graph_type'])
            if parsed is None:
                logger.warning("Unknown default graph type %r, using '%s'.",
                               data['default_graph_type'], graph_type.value)
            else:
                graph_type = parsed

        return cls(locale=locale, default_theme=theme, default_graph_type=graph_type)


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    """
    Load settings from a JSON file.

    Never raises: a missing or unreadable file yields the default
    settings, so callers can render before settings are available.
    """
    if path is None:
        return EngineSettings()

    try:
        with open(path, 'r', encoding='utf-8') as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logger.info("Settings file '%s' not found, using defaults.", path)
        return EngineSettings()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Cannot read settings file '%s': %s", path, exc)
        return EngineSettings()

    return EngineSettings.from_dict(data)


def load_mapping_config(path: Optional[Union[str, Path]] = None) -> MappingConfig:
    """
    Load a mapping config from a JSON file.

    Raises:
        MappingConfigError: If the file cannot be read or is malformed.
    """
    if path is None:
        return MappingConfig()

    try:
        with open(path, 'r', encoding='utf-8') as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise MappingConfigError(f"Cannot read mapping config '{path}': {exc}")

    return MappingConfig.from_dict(data)


@dataclass(frozen=True)
class EngineConfig:
    """
    Top-level configuration for the engine.

    Attributes:
        mapping:  Size / color constants.
        settings: Host UI settings (locale, defaults).
    """
    mapping: MappingConfig = field(default_factory=MappingConfig)
    settings: EngineSettings = field(default_factory=EngineSettings)
