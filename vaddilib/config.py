"""Library-wide defaults."""

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

# Tolerance applied before flooring month/day counts derived from fractional years
FLOOR_EPSILON = 1e-9

# Form defaults
DEFAULT_INTEREST_TYPE = "simple"
DEFAULT_RATE_TYPE = "rupee"
DEFAULT_DURATION_TYPE = "dates"
DEFAULT_COMPOUND_FREQUENCY = "annually"
