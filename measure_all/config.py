# Application Global Variables
# This module serves as a way to share settings across the measurement
# tools (global variables). Curated pair and nominal tables are not kept
# here; they live in the preset file managed by storage.presets.

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# more information is written to the log.
DEBUG = False

# Name of the package logger
LOGGER_NAME = 'measure_all'

# Default tolerance thresholds (deviation from nominal)
DEFAULT_ANGLE_GOOD_DEG = 1.0
DEFAULT_ANGLE_WARNING_DEG = 5.0
DEFAULT_LENGTH_GOOD = 0.01
DEFAULT_LENGTH_WARNING = 0.1
DEFAULT_PERPENDICULAR_GOOD = 0.1
DEFAULT_PERPENDICULAR_WARNING = 0.5

# Nominal values used when a pair has no entry in the nominal tables
DEFAULT_NOMINAL_ANGLE_DEG = 90.0
DEFAULT_NOMINAL_LENGTH = 10.0
DEFAULT_NOMINAL_PERPENDICULAR = 10.0

# Only lines whose names start with this prefix are measurement lines
LINE_NAME_PREFIX = 'L'

# Default sphere-to-line grid (first N spheres x first M lines)
CROSS_PAIR_MAX_SOURCES = 3
CROSS_PAIR_MAX_TARGETS = 2

# Angular resolution of angle arcs, in whole degrees
ARC_STEP_DEGREES = 1

# Preset file name (stored in the resources folder)
PRESETS_FILENAME = 'presets.json'

# Name given to the arc drawn for an angle pair
ARC_NAME_FORMAT = 'Arc_{a}_{b}'
