"""Half-up rounding used by every estimate figure.

Python's round() and np.round() use round-half-to-even. The published
estimate rounds halves upwards (floor(x + 0.5)), so 0.25 years becomes 0.3
and 2.5 litres becomes 3.
"""

import numpy as np


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to the given number of decimals, halves rounding towards +inf.

    Args:
        value: Value to round
        decimals: Number of decimal places to keep

    Returns:
        Rounded value as a Python float (non-finite values are returned unchanged)
    """
    factor = 10.0**decimals
    return float(np.floor(value * factor + 0.5) / factor)


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(np.floor(value + 0.5))
