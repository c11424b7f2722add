"""
Build a small histogram and print its total and bucket counts.

    $ python -m binning
    4 [1, 2, 0, 1]
"""

import logging

from binning import constants
from binning.histogram import Histogram


def main():
    logging.basicConfig(level=logging.INFO)
    hist = Histogram(constants.demo_num_bins, constants.demo_range)
    for value in constants.demo_samples:
        hist.sample(value)
    print(hist.total_count(), hist.counts())


if __name__ == "__main__":
    main()
