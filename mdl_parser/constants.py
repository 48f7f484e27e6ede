# mdl_parser/constants.py
from enum import IntEnum

# Safety ceiling for every header-driven count
MAX_COUNT = 10000

# One ModelHeader per quality level
MODEL_COUNT = 3

# Container part indices
FORMAT_PART = 0
DEFINITION_PART = 1

# Strings section scan
STRINGS_SCAN_ALIGNMENT = 4
STRINGS_MAX_COUNT = 1000
STRINGS_SAMPLE_SIZE = 200
STRINGS_MIN_TERMINATORS = 3
STRINGS_PRINTABLE_RATIO = 0.6
STRINGS_TEXT_RATIO = 0.8

# osg_* models carry extra padding after the model headers
OSG_PATH_MARKER = '/osg_'
OSG_SKIP_SIZE = 120

# Largest value a trailing padding length byte may hold
MAX_PADDING = 32

class ModelQuality(IntEnum):
    """Detail levels a model may provide."""
    HIGH = 0
    MEDIUM = 1
    LOW = 2
