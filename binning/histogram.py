"""
Fixed-size histogram over a half-open range

Samples are mapped to one of `num_bins` equal-width buckets and counted.
The histogram never grows, never shrinks and never partially records a
sample: either the bucket and the total both go up by one, or an
exception is raised and nothing changes.
"""

import logging
import numbers

import numpy as np

from binning.errors import IndexFail, InvalidHistogram, OutOfRange
from binning.scale import Scale, scale_factory

log = logging.getLogger(__name__)


class Histogram:
    def __init__(self, num_bins: int, scale):
        """
        :param num_bins: number of buckets, at least 1
        :param scale: a Scale, or a (low, high) pair from which one is built
        """
        if isinstance(num_bins, bool) or not isinstance(num_bins, numbers.Integral):
            raise InvalidHistogram(f"bucket count {num_bins!r} is not an integer")
        if num_bins < 1:
            raise InvalidHistogram(f"bucket count must be at least 1, got {num_bins}")

        if not isinstance(scale, Scale):
            try:
                low, high = scale
            except (TypeError, ValueError) as err:
                raise InvalidHistogram(
                    f"range {scale!r} is not a (low, high) pair"
                ) from err
            scale = scale_factory(low, high)

        self._num_bins = int(num_bins)
        self._scale = scale
        self._bins = np.zeros(self._num_bins, dtype=np.int64)
        self._count = 0

    @property
    def num_bins(self) -> int:
        return self._num_bins

    @property
    def scale(self) -> Scale:
        return self._scale

    def __repr__(self):
        return f"{self.__class__.__name__}(size={self.num_bins}, scale={self.scale}, counts={self.counts()})"

    def sample(self, value):
        """
        Count a new sample.

        :raises OutOfRange: value is not in [low, high), or is NaN
        :raises IndexFail: value passed the range check but mapped outside
            the buckets
        """
        if not self.scale.contains(value):
            raise OutOfRange(value, self.scale)
        index = self._bucket_index(value)
        self._bins[index] += 1
        self._count += 1

    def _bucket_index(self, value):
        index = self.scale.bucket(value, self.num_bins)
        if index == self.num_bins:
            # Position rounded up to 1.0 for a value just below the upper bound
            log.debug("clamping %r from bucket %d to %d", value, index, index - 1)
            index = self.num_bins - 1
        if not 0 <= index < self.num_bins:
            log.warning(
                "%r is inside %s but mapped to bucket %r of %d",
                value,
                self.scale,
                index,
                self.num_bins,
            )
            raise IndexFail(value, index, self.num_bins)
        return int(index)

    def counts(self):
        """Return the per-bucket counts, lowest bucket first."""
        return self._bins.tolist()

    def total_count(self) -> int:
        """Return the number of samples taken."""
        return self._count

    def min(self):
        """
        Return the lowest bucket index, if any, containing a non-zero count.
        """
        occupied = np.flatnonzero(self._bins)
        return int(occupied[0]) if occupied.size else None

    def max(self):
        """
        Return the highest bucket index, if any, containing a non-zero count.
        """
        occupied = np.flatnonzero(self._bins)
        return int(occupied[-1]) if occupied.size else None

    def bin_edges(self):
        """Return the num_bins + 1 bucket boundaries on the true scale."""
        return self.scale.bin_edges(self.num_bins)

    def to_pairs(self):
        """Return one {"x": lower edge, "count": count} dict per bucket."""
        return [
            {"x": x, "count": count}
            for x, count in zip(self.bin_edges()[:-1], self.counts())
        ]
