"""
    Range normalization and linear scaling of node values.

    Plain functions over explicit inputs: the adapters call them once
    per node, so nothing is cached.
"""
import math
from typing import Iterable, NamedTuple, Optional, Sequence

from mapping_api.models.node import Node, Number


class ValueRange(NamedTuple):
    """
    ``(min, max)`` of a value set.

    Both ends are ``None`` for an empty set.
    """
    min: Optional[Number]
    max: Optional[Number]

    @property
    def is_empty(self) -> bool:
        return self.min is None or self.max is None

    @property
    def is_degenerate(self) -> bool:
        """True for an empty range or a single-valued one (min == max)."""
        return self.is_empty or self.min == self.max


EMPTY_RANGE = ValueRange(None, None)


def get_min_max(nodes: Iterable[Node]) -> ValueRange:
    """
    Compute the range of the ``value`` field over a node sequence.

    Args:
        nodes: Nodes to inspect (may be empty).

    Returns:
        ``ValueRange(min, max)``; ``EMPTY_RANGE`` when there are no nodes.
    """
    values = [node.value for node in nodes]
    if not values:
        return EMPTY_RANGE
    return ValueRange(min(values), max(values))


def linear_map(value: Number,
               source: Sequence[Optional[Number]],
               target: Sequence[Number]) -> float:
    """
    Map ``value`` from ``source`` range into ``target`` range by linear
    interpolation: ``lo + (v - min) / (max - min) * (hi - lo)``.

    A degenerate source (empty, or ``min == max``) has no slope; the
    midpoint of the target range is returned instead.  The same holds
    when the position inside the source range cannot be computed as a
    finite number.  The position is clamped to the source range, so the
    result always lies within ``target``.

    Args:
        value:  The scalar to map.
        source: ``(min, max)`` of the data.
        target: ``(lo, hi)`` of the output.

    Returns:
        The mapped value.
    """
    lo, hi = target
    src_min, src_max = source
    if src_min is None or src_max is None or src_max == src_min:
        return midpoint(target)

    fraction = _fraction(value, src_min, src_max)
    if fraction is None:
        return midpoint(target)
    return lo + min(max(fraction, 0.0), 1.0) * (hi - lo)


def _fraction(value: Number, src_min: Number, src_max: Number) -> Optional[float]:
    """Relative position of ``value`` in ``[src_min, src_max]``, or None."""
    try:
        value, src_min, src_max = float(value), float(src_min), float(src_max)
    except OverflowError:
        return None

    span = src_max - src_min
    if math.isfinite(span):
        fraction = (value - src_min) / span
    else:
        # Both ends are finite but their distance is not; halve first
        fraction = (value / 2 - src_min / 2) / (src_max / 2 - src_min / 2)
    return fraction if math.isfinite(fraction) else None


def midpoint(target: Sequence[Number]) -> float:
    lo, hi = target
    return (lo + hi) / 2
