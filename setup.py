#!/usr/bin/env python
from setuptools import find_packages, setup

with open('requirements.txt', 'r') as f:
    install_requires = f.read().splitlines()

setup(
    name="binning",
    version="0.1.0",
    description="Fixed-size histograms over ordered, bounded value ranges",
    author="Ought",
    author_email="ergo@ought.org",
    url="https://ought.org",
    packages=find_packages(exclude=["tests"]),
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
)
