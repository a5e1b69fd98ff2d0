# histogram.py
"""
Per-channel intensity histograms.

A Histogram holds 256 counts indexed by intensity. build_histograms() scans
an image once and returns one histogram each for R, G and B.

Empty histograms: get_low() and get_high() return the sentinel (0, 0) when
every bin is zero. That is indistinguishable from "intensity 0 has count
0", so callers that care should check is_empty() first.

Cumulative histograms: cumulate() turns the counts into running sums in
place. It is not idempotent (a second call accumulates again), so the
`cumulated` flag records whether it has already been applied.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple

from errors import IndexOutOfRange
from pixel_codec import unpack_u8

if TYPE_CHECKING:
    from rgba_image import RGBAImage

logger = logging.getLogger(__name__)

BINS = 256


class Histogram:
    """Histogram for at most 256 intensity values."""

    def __init__(self, counts: Optional[Sequence[int]] = None):
        if counts is None:
            self._data = [0] * BINS
        else:
            if len(counts) != BINS:
                raise ValueError(f"Histogram needs exactly {BINS} bins, got {len(counts)}")
            if any(c < 0 for c in counts):
                raise ValueError("Histogram counts must be non-negative")
            self._data = [int(c) for c in counts]
        self.cumulated = False

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "Histogram":
        return cls(counts)

    # ---- queries ----
    def get_count(self, intensity: int) -> int:
        """Count for a given intensity value [0..255]."""
        if not 0 <= intensity < BINS:
            raise IndexOutOfRange(f"Intensity {intensity} outside [0, {BINS - 1}]")
        return self._data[intensity]

    def get_low(self) -> Tuple[int, int]:
        """(count, intensity) of the lowest non-empty bin, (0, 0) if empty."""
        for i, count in enumerate(self._data):
            if count != 0:
                return count, i
        return 0, 0

    def get_high(self) -> Tuple[int, int]:
        """(count, intensity) of the highest non-empty bin, (0, 0) if empty."""
        for i in range(BINS - 1, -1, -1):
            if self._data[i] != 0:
                return self._data[i], i
        return 0, 0

    def is_empty(self) -> bool:
        return not any(self._data)

    def total(self) -> int:
        return sum(self._data)

    @property
    def counts(self) -> List[int]:
        return list(self._data)

    # ---- transforms ----
    def cumulate(self):
        """Cumulative histogram: bin[i] += bin[i-1] for i = 1..255, in place."""
        if self.cumulated:
            logger.warning("Histogram is already cumulative; accumulating again")
        data = self._data
        for i in range(1, BINS):
            data[i] = data[i] + data[i - 1]
        self.cumulated = True

    # ---- container protocol ----
    def __len__(self) -> int:
        return BINS

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, Histogram):
            return NotImplemented
        return self._data == other._data

    def __repr__(self):
        low, high = self.get_low(), self.get_high()
        return (f"Histogram(total={self.total()}, low={low}, high={high}, "
                f"cumulated={self.cumulated})")


def build_histograms(image: "RGBAImage | Iterable[int]") -> Tuple[Histogram, Histogram, Histogram]:
    """Single pass over all packed pixels: (R, G, B) histograms."""
    rhist = [0] * BINS
    ghist = [0] * BINS
    bhist = [0] * BINS
    n = 0
    for px in image:
        r, g, b, _ = unpack_u8(px)
        rhist[r] += 1
        ghist[g] += 1
        bhist[b] += 1
        n += 1
    logger.debug(f"Built histograms over {n} pixels")
    return Histogram(rhist), Histogram(ghist), Histogram(bhist)


def merge_histograms(parts: Iterable[Histogram]) -> Histogram:
    """Add partial histograms bin by bin (e.g. one per image stripe)."""
    out = [0] * BINS
    for part in parts:
        if part.cumulated:
            raise ValueError("Cannot merge cumulative histograms")
        for i, c in enumerate(part):
            out[i] += c
    return Histogram(out)


if __name__ == "__main__":
    import sys
    from rgba_image import RGBAImage

    if len(sys.argv) < 2:
        print("Usage: python histogram.py <image>")
    else:
        img = RGBAImage.from_file(sys.argv[1])
        for name, hist in zip("RGB", img.histogram()):
            print(f"{name}: low={hist.get_low()} high={hist.get_high()} total={hist.total()}")
