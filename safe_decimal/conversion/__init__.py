"""
Conversion modules для safe_decimal

Строки и нативные float'ы в/из пары (numerator, denominator).
"""

# Parsing
from safe_decimal.conversion.parsing import (
    RADIX_PREFIXES,
    DecimalParseError,
    ParseErrorKind,
    from_parts,
    parse,
    parse_integer,
)

# Float import
from safe_decimal.conversion.float_import import import_float, split_float

# Formatting
from safe_decimal.conversion.formatting import (
    should_round_up,
    to_decimal_string,
    to_fixed,
)

__all__ = [
    # Parsing
    "RADIX_PREFIXES",
    "DecimalParseError",
    "ParseErrorKind",
    "from_parts",
    "parse",
    "parse_integer",
    # Float import
    "import_float",
    "split_float",
    # Formatting
    "should_round_up",
    "to_decimal_string",
    "to_fixed",
]
