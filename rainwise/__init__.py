"""RainWise rooftop rainwater harvesting estimator."""

__version__ = "0.1.0"
