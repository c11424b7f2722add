# Histogram built by `python -m binning`
demo_num_bins = 4
demo_range = (0.0, 1.0)
demo_samples = [0.1, 0.3, 0.35, 0.78]
