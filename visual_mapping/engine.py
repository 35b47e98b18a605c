"""
    VisualMappingEngine — the single entry-point of the mapping engine.

    Design Patterns applied
    ───────────────────────
    • Facade             – one ``render()`` call hides range normalization,
                           size scaling, color bucketing, legend building
                           and backend adaptation.
    • Strategy           – one adapter per rendering backend.
    • Discriminated      – ``GraphType`` is a closed enum; the fixed
      dispatch             ``ADAPTERS`` table picks exactly one adapter,
                           and an unknown type renders nothing.

    The engine holds only immutable configuration.  Rendering the same
    ``(GraphData, theme, graph_type)`` twice yields equal results.
"""
import logging
import webbrowser
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from mapping_api.types import GraphType, Theme

from .adapters import ADAPTERS, get_adapter_class
from .config import EngineConfig, EngineSettings, MappingConfig
from .services.base_adapter import GraphAdapter, NodeClickFunc
from .services.coloring import (
    LEGEND_HIGH_CAPTION,
    LEGEND_LOW_CAPTION,
    ColorBucketizer,
    LegendCell,
    build_legend,
)
from .services.serialization_service import GraphSerializer

logger = logging.getLogger(__name__)

PROFILE_URL_PREFIX = 'https://github.com/'

# UI messages by key and locale
MESSAGES: Mapping[str, Mapping[str, str]] = {
    'component_darkMode': {
        'en': 'Dark mode',
        'zh_CN': '暗黑模式',
    },
}


def get_message(key: str, locale: str) -> str:
    """Localized message; falls back to English, then to the key itself."""
    translations = MESSAGES.get(key, {})
    return translations.get(locale) or translations.get('en') or key


def open_github_profile(node: Mapping[str, Any]) -> str:
    """
    Default node click handler: open ``https://github.com/<node id>``.

    Returns:
        The opened URL.
    """
    url = PROFILE_URL_PREFIX + str(node['id'])
    webbrowser.open(url)
    return url


@dataclass(frozen=True)
class ThemeToggle:
    """
    State of the dark-mode toggle of the host UI.

    Attributes:
        checked:  Whether the dark theme is active.
        disabled: True when the backend cannot switch theme after rendering.
        label:    Localized caption.
    """
    checked: bool
    disabled: bool
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return {'checked': self.checked, 'disabled': self.disabled, 'label': self.label}


@dataclass(frozen=True)
class RenderResult:
    """
    Everything the rendering surface needs for one graph.

    ``graph_type`` is ``None`` for a no-op result (unknown backend or no
    data), which the UI shows as blank.

    Attributes:
        graph_type:   Backend that produced ``props``.
        theme:        Active theme.
        style:        Container style, passed through untouched.
        props:        Backend properties (``option``/``on_events`` or
                      ``data``/``on_node_click``).
        legend:       Legend cells in bucket order.
        theme_toggle: Toggle state for the host UI.
    """
    graph_type: Optional[GraphType]
    theme: Theme
    style: Mapping[str, Any] = field(default_factory=dict)
    props: Mapping[str, Any] = field(default_factory=dict)
    legend: Tuple[LegendCell, ...] = ()
    theme_toggle: Optional[ThemeToggle] = None

    @property
    def is_empty(self) -> bool:
        return self.graph_type is None

    @property
    def option(self) -> Optional[Dict[str, Any]]:
        """Chart option (force backend only)."""
        return self.props.get('option')

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        """Adapted ``{nodes, edges}`` (node-link backend only)."""
        return self.props.get('data')

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation; click callbacks are omitted."""
        return {
            'graph_type': self.graph_type.value if self.graph_type else None,
            'theme': self.theme.value,
            'style': GraphSerializer.strip_callables(self.style),
            'props': GraphSerializer.strip_callables(self.props),
            'legend': {
                'low': LEGEND_LOW_CAPTION,
                'high': LEGEND_HIGH_CAPTION,
                'cells': [cell.to_dict() for cell in self.legend],
            },
            'theme_toggle': self.theme_toggle.to_dict() if self.theme_toggle else None,
        }


class VisualMappingEngine:
    """
    Facade over the mapping pipeline.

    Usage:
        engine = VisualMappingEngine()
        result = engine.render(graph, graph_type='force', theme='dark')
        result.option          # chart configuration
        result.legend          # legend cells
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Args:
            config: Engine configuration; defaults are used when omitted,
                    so the engine is usable before settings are loaded.
        """
        self._config = config or EngineConfig()
        self._serializer = GraphSerializer()
        self._build()
        logger.info("VisualMappingEngine initialized (%d backends).", len(self._adapters))

    def _build(self) -> None:
        mapping = self._config.mapping
        self._adapters: Dict[GraphType, GraphAdapter] = {
            graph_type: adapter_cls(mapping) for graph_type, adapter_cls in ADAPTERS.items()
        }
        self._bucketizers: Dict[Theme, ColorBucketizer] = {
            theme: ColorBucketizer(mapping.thresholds, mapping.palette_for(theme))
            for theme in Theme
        }

    # ── Configuration ────────────────────────────────────────────

    @property
    def config(self) -> EngineConfig:
        return self._config

    @config.setter
    def config(self, value: EngineConfig) -> None:
        self._config = value
        self._build()

    @property
    def settings(self) -> EngineSettings:
        return self._config.settings

    def apply_settings(self, settings: EngineSettings) -> None:
        """Swap in settings once they are loaded."""
        self.config = replace(self._config, settings=settings)
        logger.info("Settings applied (locale=%s).", settings.locale)

    @property
    def mapping(self) -> MappingConfig:
        return self._config.mapping

    # ── Building blocks ──────────────────────────────────────────

    def resolve_theme(self, theme: Any = None) -> Theme:
        if theme is None:
            return self._config.settings.default_theme
        return Theme.parse(theme)

    def resolve_graph_type(self, graph_type: Any = None) -> Optional[GraphType]:
        """
        ``None`` selects the configured default; an unrecognized value
        resolves to ``None`` (nothing to render).
        """
        if graph_type is None:
            return self._config.settings.default_graph_type
        return GraphType.parse(graph_type)

    def bucketizer(self, theme: Any = None) -> ColorBucketizer:
        return self._bucketizers[self.resolve_theme(theme)]

    def legend(self, theme: Any = None) -> Tuple[LegendCell, ...]:
        """Legend cells of a theme, in bucket order."""
        return build_legend(self.bucketizer(theme))

    def theme_toggle(self, theme: Any = None,
                     graph_type: Any = None) -> ThemeToggle:
        resolved = self.resolve_graph_type(graph_type)
        adapter_cls = get_adapter_class(resolved)
        return ThemeToggle(
            checked=self.resolve_theme(theme) is Theme.DARK,
            disabled=adapter_cls is not None and not adapter_cls.supports_theme_switch,
            label=get_message('component_darkMode', self._config.settings.locale),
        )

    # ── Rendering ────────────────────────────────────────────────

    def render(
        self,
        data: Any,
        graph_type: Any = None,
        theme: Any = None,
        style: Optional[Mapping[str, Any]] = None,
        on_node_click: Optional[NodeClickFunc] = None,
    ) -> RenderResult:
        """
        Map a graph to the render properties of one backend.

        Args:
            data:          ``GraphData`` or an equivalent dictionary.
                           ``None`` renders nothing.
            graph_type:    Backend name or ``GraphType``; ``None`` uses the
                           configured default.
            theme:         Theme name or ``Theme``; ``None`` uses the default.
            style:         Container style, passed through untouched.
            on_node_click: Click handler; defaults to ``open_github_profile``.

        Returns:
            A ``RenderResult``; a no-op result for an unknown backend
            or missing data.

        Raises:
            GraphDataError: If ``data`` is a malformed dictionary.
        """
        resolved_theme = self.resolve_theme(theme)
        style = style if style is not None else {}

        if data is None:
            logger.info("No graph data, nothing to render.")
            return RenderResult(graph_type=None, theme=resolved_theme, style=style)

        resolved_type = self.resolve_graph_type(graph_type)
        adapter = self._adapters.get(resolved_type) if resolved_type else None
        if adapter is None:
            logger.warning("Unknown graph type %r, nothing to render.", graph_type)
            return RenderResult(graph_type=None, theme=resolved_theme, style=style)

        graph = self._serializer.deserialize(data)
        if graph.is_empty():
            logger.info("Graph has no nodes, rendering an empty chart.")
        dangling = graph.get_dangling_edges()
        if dangling:
            logger.debug("%d edge(s) reference unknown nodes: %s", len(dangling), dangling)

        bucketizer = self._bucketizers[resolved_theme]
        adapted = adapter.adapt(graph, bucketizer)
        click = on_node_click if on_node_click is not None else open_github_profile

        logger.debug("Rendered %r with %r (%s theme)", graph, adapter, resolved_theme.value)
        return RenderResult(
            graph_type=resolved_type,
            theme=resolved_theme,
            style=style,
            props=adapter.render_props(adapted, click),
            legend=build_legend(bucketizer),
            theme_toggle=self.theme_toggle(resolved_theme, resolved_type),
        )

    def render_json(self, data: Any, **kwargs: Any) -> Dict[str, Any]:
        """``render()`` followed by ``RenderResult.to_dict()``."""
        return self.render(data, **kwargs).to_dict()

    # ── Dunder ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"VisualMappingEngine(backends={[t.value for t in self._adapters]}, "
            f"thresholds={self._config.mapping.thresholds})"
        )
