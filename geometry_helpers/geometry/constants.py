# geometry/constants.py
"""Constants for geometric calculations."""
import math
import sys

# Default relative tolerance for floating-point comparisons (square root of machine epsilon)
DEFAULT_TOLERANCE = math.sqrt(sys.float_info.epsilon)

# Smallest tolerance accepted by the comparator
MIN_TOLERANCE = sys.float_info.epsilon

# One full turn in radians
TWO_PI = 2 * math.pi
