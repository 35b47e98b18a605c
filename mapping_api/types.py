"""
    Enumerated input types and numeric value coercion.
"""
import logging
import math
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, raw: Any) -> 'Theme':
        """
        Resolve a theme from a string (case-insensitive).
        Unknown values fall back to LIGHT.
        """
        if isinstance(raw, Theme):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            logger.warning("Unknown theme %r, falling back to '%s'.", raw, cls.LIGHT.value)
            return cls.LIGHT


class GraphType(Enum):
    """Rendering backend selector."""
    FORCE = "force"
    NODE_LINK = "node-link"

    @classmethod
    def parse(cls, raw: Any) -> Optional['GraphType']:
        """
        Resolve a graph type from a string.

        Returns:
            The matching member, or ``None`` when the value is not recognized.
        """
        if isinstance(raw, GraphType):
            return raw
        if raw is None:
            return None
        key = str(raw).strip().lower()
        key = _GRAPH_TYPE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


# Backend names used by earlier versions of the widget
_GRAPH_TYPE_ALIASES = {
    "echarts": GraphType.FORCE.value,
    "antv": GraphType.NODE_LINK.value,
    "graphin": GraphType.NODE_LINK.value,
    "node_link": GraphType.NODE_LINK.value,
}


class ValueCoercer:
    """Validation and conversion of numeric graph fields"""

    @staticmethod
    def is_number(value: Any) -> bool:
        """Check if value is a real number (bool excluded)"""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def to_number(value: Any) -> float:
        """
        Convert value to a finite number.
        Accepts ints, floats and numeric strings ("50", " 3.5 ").
        Integers are kept as ``int`` so output stays identical to input;
        integers beyond the float range are rejected.
        """
        if ValueCoercer.is_number(value):
            number = value
        elif isinstance(value, str):
            text = value.strip()
            try:
                number = int(text)
            except ValueError:
                try:
                    number = float(text)
                except ValueError:
                    raise ValueError(f"Cannot convert {value!r} to a number")
        else:
            raise ValueError(f"Cannot convert {value!r} to a number")

        try:
            finite = math.isfinite(number)
        except OverflowError:
            # int beyond the float range
            finite = False
        if not finite:
            raise ValueError(f"Value {value!r} is not finite")
        return number
