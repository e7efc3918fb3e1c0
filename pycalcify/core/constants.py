"""
Default configuration values shared across PyCalcify.

There are no configuration files or environment variables; every knob is
a keyword argument whose default lives here.
"""

# Rounding modes understood by the arithmetic accumulator
ROUNDING_CEIL = 'ceil'
ROUNDING_FLOOR = 'floor'
ROUNDING_ROUND = 'round'
ROUNDING_MODES = (ROUNDING_CEIL, ROUNDING_FLOOR, ROUNDING_ROUND)

# Accumulator defaults
DEFAULT_INITIAL_VALUE = 0
DEFAULT_ROUNDED = False
DEFAULT_ROUNDING_MODE = ROUNDING_FLOOR
DEFAULT_DECIMAL_PLACES = 2

PERCENTAGE_DIVISOR = 100

# Output formats for Arithmetic.get_formatted_result()
FORMAT_INT = 'int'
FORMAT_FLOAT = 'float'
FORMAT_STRING = 'string'
RESULT_FORMATS = (FORMAT_INT, FORMAT_FLOAT, FORMAT_STRING)

# Cofactor expansion is O(n!); above this size determinant() warns.
DETERMINANT_WARN_SIZE = 9

# 171! exceeds the float64 range; factorial() returns inf from here on.
FACTORIAL_OVERFLOW_AT = 171
