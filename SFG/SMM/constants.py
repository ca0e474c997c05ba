# =============================================================================
# constants.py — SMM Chip Geometry and Text-Format Constants
# =============================================================================
#
# Chip geometry values below come from the sensor data sheet.  DO NOT change
# ROW_SIZE without a new chip revision: the capacity planner rejects any
# frame that is not a whole number of rows.

# -----------------------------------------------------------------------------
# CHIP GEOMETRY
# -----------------------------------------------------------------------------

ROW_SIZE   = 2_048         # cells in one physical row of the chip
BYTE_MASK  = 0xFF          # ADC values are truncated to the cell width

# -----------------------------------------------------------------------------
# DEFINITION TEXT FORMAT
# -----------------------------------------------------------------------------
# Fields are separated by any run of spaces/tabs plus one optional ',' or '='.
# Lines whose first non-blank characters are '#' or '//' are comments.

WHITESPACE      = " \t"
SEPARATORS      = ",="
LINE_ENDINGS    = "\r\n"
COMMENT_MARKERS = ("#", "//")

DISTRIBUTION_DELIMITER = "$"     # "<first>,<last>,<step> $ <fragment>,..."
FILE_INCLUDE_PREFIX    = "@"     # "@path" inlines a binary file, one value/byte
GROUP_OPEN             = "("     # "(name)" groups a multi-character name
GROUP_CLOSE            = ")"

# Byte-scale suffixes accepted on size-like integers ("64K", "2G", ...)
SIZE_SUFFIXES = {
    "K": 1024,
    "M": 1024 * 1024,
    "G": 1024 * 1024 * 1024,
}

# -----------------------------------------------------------------------------
# RUN DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_CONFIG_FILE        = "sensor_frame_gen.conf"
DEFAULT_ADC_PER_NUCLEOTIDE = 1
DEFAULT_DATA_FRAMES        = 1
DEFAULT_FILLER_VALUE       = 0
DEFAULT_RANDOM_SEED        = 0
