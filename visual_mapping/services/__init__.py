"""
Core services — value scaling, color bucketing, legend, adapter base.

Note: ``coloring``, ``base_adapter`` and ``serialization_service`` are
NOT imported eagerly to avoid circular imports with
``visual_mapping.config``.  Import them directly, e.g.
``from visual_mapping.services.coloring import ColorBucketizer``.
"""
from .scaling import ValueRange, EMPTY_RANGE, get_min_max, linear_map
from .exceptions import GraphDataError, MappingConfigError

__all__ = [
    'ValueRange',
    'EMPTY_RANGE',
    'get_min_max',
    'linear_map',
    'GraphDataError',
    'MappingConfigError',
]
