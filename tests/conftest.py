from datetime import datetime
from decimal import Decimal

import pytest

from binning import Histogram
from binning.scale import IntegerScale, Scale, TimeScale

scales_to_test = [
    Scale(0.0, 1.0),
    Scale(-1.0, 1.0),
    Scale(-3, 10.5),
    Scale(Decimal("0.25"), Decimal("7.75")),
    IntegerScale(1, 5),
    IntegerScale(-100, 1000),
    TimeScale(datetime(2020, 1, 1), datetime(2020, 12, 31)),
]


@pytest.fixture(params=scales_to_test, ids=lambda scale: type(scale).__name__)
def scale(request):
    return request.param


@pytest.fixture
def unit_histogram():
    return Histogram(4, (0.0, 1.0))


def points_inside(scale, num_points=50):
    """Evenly spread values in [low, high), low included"""
    return [scale.low + scale.width * i / num_points for i in range(num_points)]


@pytest.fixture
def inside_points(scale):
    return points_inside(scale)
