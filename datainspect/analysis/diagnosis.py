# ==============================================
# Diagnosis (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes for the OUTPUT of the diagnostics rules and the
#   thresholds that control them.
#
# CLASSES:
# --------
# - Diagnosis (dataclass)
#     The warnings raised for a single column, in rule order.
#
#     Attributes:
#     -----------
#     - column: str                  → Column name
#     - warnings: list[str]          → Ordered warning messages
#
#     Properties / Methods:
#     ---------------------
#     - is_clean -> bool             → True when no rule fired
#     - summary() -> str             → "ok" or the warnings joined with "; "
#
# - DiagnosticThresholds (dataclass)
#     - max_missing_ratio: float     → Warn above X% missing (default 0.05)
#     - max_unique_ratio: float      → Warn above X% unique in a categorical column (default 0.95)
#     - constant_tolerance: float    → max - min below this is near-constant (default 1e-12)
#
# ==============================================

from dataclasses import dataclass, field
from typing import List

CLEAN = "ok"


@dataclass
class Diagnosis:
    """
    Ordered data-quality warnings for one column.

    An empty warning list is reported as "ok" rather than as nothing,
    so callers can tell "checked and clean" apart from "not checked".
    """

    column: str
    warnings: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.warnings

    def summary(self) -> str:
        if self.is_clean:
            return CLEAN
        return "; ".join(self.warnings)


@dataclass
class DiagnosticThresholds:
    """
    Configurable thresholds for the diagnostics rules.
    """

    max_missing_ratio: float = 0.05
    """
    Fraction of empty values above which a column is flagged.
    Default 0.05 = more than 5% missing.
    """

    max_unique_ratio: float = 0.95
    """
    Fraction of distinct values (among non-missing) above which a
    categorical column looks like an identifier.
    """

    constant_tolerance: float = 1e-12
    """
    A numeric column whose range (max - min) is below this is near-constant.
    """
