"""
Exceptions raised by binning.

Everything derives from BinningError. Construction problems and rejected
samples are also ValueErrors, so callers that only care about "bad input"
can catch that.
"""


class BinningError(Exception):
    pass


class InvalidHistogram(BinningError, ValueError):
    """The bucket count or range given to a histogram or scale is unusable."""


class SampleError(BinningError, ValueError):
    """A sample was rejected. The histogram it was offered to is unchanged."""


class OutOfRange(SampleError):
    def __init__(self, value, scale):
        self.value = value
        self.scale = scale
        super().__init__(
            f"{value!r} is outside the range [{scale.low!r}, {scale.high!r})"
        )


class IndexFail(SampleError):
    """
    The value passed the range check but its bucket index did not land in
    [0, num_bins). This points at a precision problem in the mapping, not at
    bad input.
    """

    def __init__(self, value, index, num_bins):
        self.value = value
        self.index = index
        self.num_bins = num_bins
        super().__init__(
            f"{value!r} mapped to bucket {index!r}, expected 0 <= index < {num_bins}"
        )
