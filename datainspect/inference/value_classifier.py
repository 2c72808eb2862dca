# ==============================================
# ValueClassifier
# ==============================================
#
# PURPOSE:
#   Map one raw text value (as read from a CSV cell or a stringified
#   JSON scalar) to a lexical category. No state, no errors: every
#   input yields exactly one category.
#
# ORDER OF CHECKS:
# ----------------
#   1. INTEGER  → optional sign + ASCII digits, fits in a signed 64-bit int
#   2. FLOAT    → finite decimal literal ("1.5", ".5", "1.", "1e5", "-2E-3")
#                 also catches integer literals outside the 64-bit range
#   3. BOOLEAN  → "true" / "false", case-insensitive
#   4. STRING   → everything else
#
#   Leading/trailing whitespace, digit-group underscores and the
#   literals "nan" / "inf" are NOT numeric here, even though Python's
#   int() / float() would accept them.
#
# ==============================================

import math
import re
from enum import Enum
from typing import Optional


class ValueCategory(Enum):
    """Lexical category of a single raw value."""
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueCategory.INTEGER, ValueCategory.FLOAT)


class ValueClassifier:
    INT64_MIN = -(2 ** 63)
    INT64_MAX = 2 ** 63 - 1

    INT64_MAX_DIGITS = 19

    BOOLEAN_LITERALS = {"true", "false"}

    INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
    FLOAT_PATTERN = re.compile(
        r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    )

    @classmethod
    def classify(cls, raw: str) -> ValueCategory:
        if cls._is_integer(raw):
            return ValueCategory.INTEGER

        if cls.parse_float(raw) is not None:
            return ValueCategory.FLOAT

        if raw.lower() in cls.BOOLEAN_LITERALS:
            return ValueCategory.BOOLEAN

        return ValueCategory.STRING

    @classmethod
    def parse_float(cls, raw: str) -> Optional[float]:
        """
        Parse a raw value as a 64-bit float using the classifier's grammar.

        Args:
            raw: The raw text value

        Returns:
            The parsed value, or None if the text is not a finite float literal.
        """
        if not cls.FLOAT_PATTERN.fullmatch(raw):
            return None
        value = float(raw)
        # "1e400" matches the grammar but overflows to inf
        if not math.isfinite(value):
            return None
        return value

    @classmethod
    def _is_integer(cls, raw: str) -> bool:
        if not cls.INTEGER_PATTERN.fullmatch(raw):
            return False
        # Longer literals cannot fit, and int() refuses very long digit strings
        if len(raw.lstrip("+-").lstrip("0")) > cls.INT64_MAX_DIGITS:
            return False
        return cls.INT64_MIN <= int(raw) <= cls.INT64_MAX


def classify(raw: str) -> ValueCategory:
    """Module-level shortcut for ValueClassifier.classify()."""
    return ValueClassifier.classify(raw)


def parse_float(raw: str) -> Optional[float]:
    """Module-level shortcut for ValueClassifier.parse_float()."""
    return ValueClassifier.parse_float(raw)
