__version__ = "0.1.0"

import logging

import binning.constants
import binning.errors
import binning.scale

from .errors import BinningError, IndexFail, InvalidHistogram, OutOfRange, SampleError
from .histogram import Histogram
from .scale import IntegerScale, Scale, TimeScale, scale_factory

logging.getLogger(__name__).addHandler(logging.NullHandler())
