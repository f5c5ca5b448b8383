"""cadence-lift: adaptive home workout generator."""

__version__ = "0.1.0"
