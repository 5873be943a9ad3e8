"""Wire constants for marketplace metadata documents."""

# Display hints for numeric traits
DISPLAY_NUMBER = "number"
DISPLAY_BOOST_NUMBER = "boost_number"
DISPLAY_BOOST_PERCENTAGE = "boost_percentage"
DISPLAY_DATE = "date"

# Royalty bounds, in basis points (10_000 == 100%)
MIN_FEE_BASIS_POINTS = 0
MAX_FEE_BASIS_POINTS = 10_000

# Number of hex digits in a background color, "rrggbb"
COLOR_HEX_LENGTH = 6

# None keeps the output on a single line
DEFAULT_JSON_INDENT = None
