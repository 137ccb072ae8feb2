"""Tolerance constants for geometric calculations.

Centralizes all tolerance values used throughout the kernel for
consistency and easy tuning. Lengths are in document units.
"""

# Zero vector detection threshold
# Vectors with magnitude below this are considered zero-length
ZERO_MAGNITUDE: float = 1e-12

# Minimum endpoint separation for a segment to define a direction
MIN_SEGMENT_LENGTH: float = 1e-3

# Minimum distance between an arc center and its direction points
MIN_ANCHOR_DISTANCE: float = 1e-3

# Smallest arc radius worth drawing
MIN_ARC_RADIUS: float = 1e-3

# Arc radius is this fraction of the shorter anchor distance
ARC_RADIUS_FRACTION: float = 1.0 / 3.0

# Sweep limits for arc construction (degrees)
MIN_ARC_ANGLE_DEG: float = 0.1
MAX_ARC_ANGLE_DEG: float = 359.9

# Default angular step between arc samples (degrees)
ARC_STEP_DEG: int = 1

# Distance under which two lines are treated as meeting
# Used by the default geometry provider for planar intersection
INTERSECTION_DISTANCE: float = 1e-6

# Parametric slack when checking that an intersection lies on both segments
SEGMENT_PARAM_SLACK: float = 1e-9
