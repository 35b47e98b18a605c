"""
    Color bucketing of node values and legend generation.

    Both are driven by the same ``(thresholds, palette)`` pair so the
    legend always describes exactly the buckets that the nodes are
    colored with.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from mapping_api.models.node import Number

from ..config import NEUTRAL_COLOR

logger = logging.getLogger(__name__)

# Captions shown at both ends of the legend swatches
LEGEND_LOW_CAPTION = 'Less'
LEGEND_HIGH_CAPTION = 'More'


class ColorBucketizer:
    """
    Maps a value to the palette entry of the first threshold it is
    strictly less than; values not below any threshold get the last
    (overflow) entry.

    A palette whose length is not ``len(thresholds) + 1`` is a
    configuration error: it is logged once and every value then maps
    to the overflow color.
    """

    def __init__(self, thresholds: Sequence[Number], palette: Sequence[str]):
        self._thresholds: Tuple[Number, ...] = tuple(thresholds)
        self._palette: Tuple[str, ...] = tuple(palette)
        self._valid = len(self._palette) == len(self._thresholds) + 1

        if not self._valid:
            logger.error(
                "Palette has %d colors but %d thresholds need %d; "
                "using overflow color %s for all values.",
                len(self._palette), len(self._thresholds),
                len(self._thresholds) + 1, self.overflow_color,
            )

    @property
    def thresholds(self) -> Tuple[Number, ...]:
        return self._thresholds

    @property
    def palette(self) -> Tuple[str, ...]:
        return self._palette

    @property
    def is_valid(self) -> bool:
        return self._valid

    @property
    def overflow_color(self) -> str:
        return self._palette[-1] if self._palette else NEUTRAL_COLOR

    @property
    def bucket_count(self) -> int:
        return len(self._thresholds) + 1

    def bucket_index(self, value: Number) -> int:
        """
        Index of the bucket ``value`` falls into.

        Ordered scan with early exit; a value equal to a threshold
        belongs to the bucket above it.
        """
        for i, threshold in enumerate(self._thresholds):
            if value < threshold:
                return i
        return len(self._thresholds)

    def color_for_bucket(self, index: int) -> str:
        if not self._valid:
            return self.overflow_color
        return self._palette[index]

    def color_for(self, value: Number) -> str:
        """Return the palette color for a node value."""
        return self.color_for_bucket(self.bucket_index(value))

    def __repr__(self) -> str:
        return f"ColorBucketizer(thresholds={self._thresholds}, palette={self._palette})"


@dataclass(frozen=True)
class LegendCell:
    """One legend swatch: ``L<i>`` id, range label, bucket color."""
    id: str
    label: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'label': self.label, 'color': self.color}


def format_threshold(value: Number) -> str:
    """Render a threshold without a trailing ``.0`` for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def bucket_labels(thresholds: Sequence[Number]) -> List[str]:
    """
    Range labels, one per bucket:
    ``"< T0"``, ``"T0 - T1"``, ..., ``"> Tn"``.
    """
    if not thresholds:
        return ['All']

    text = [format_threshold(t) for t in thresholds]
    labels = [f"< {text[0]}"]
    for low, high in zip(text, text[1:]):
        labels.append(f"{low} - {high}")
    labels.append(f"> {text[-1]}")
    return labels


def build_legend(bucketizer: ColorBucketizer) -> Tuple[LegendCell, ...]:
    """
    Build the legend of a bucketizer, in bucket order.

    Cell ``i`` describes bucket ``i`` and carries the color that
    ``bucketizer.color_for`` gives to values of that bucket.
    """
    return tuple(
        LegendCell(id=f"L{i}", label=label, color=bucketizer.color_for_bucket(i))
        for i, label in enumerate(bucket_labels(bucketizer.thresholds))
    )
