# ==============================================
# DiagnosticsEngine
# ==============================================
#
# PURPOSE:
#   Takes a finished ColumnProfile and applies a fixed rule set to
#   produce an ordered list of data-quality warnings.
#
# CLASS: DiagnosticsEngine
# ------------------------
#   Stateless: profile in, Diagnosis out. Same input, same ordered
#   warnings, every time.
#
#   Methods:
#   --------
#   - diagnose(profile, total_rows) -> Diagnosis
#       Applies rules in order:
#
#       RULE 1: MISSING VALUES (any kind)
#         missing / total_rows > max_missing_ratio
#           → "missing values: 20%"
#
#       RULE 2: HIGH CARDINALITY (categorical)
#         uniques / (total_rows - missing) > max_unique_ratio
#           → "high cardinality: 98.0% unique (likely identifier)"
#
#       RULE 3: NUMERIC CHECKS (numeric, in this order)
#         a. |max - min| < constant_tolerance → "near-constant numeric column"
#         b. parse failures > 0 → "mixed numeric and non-numeric values"
#         c. outliers > 0 → "extreme outliers detected: 2 values >= 5σ"
#
#   - diagnose_all(profiles, total_rows) -> list[Diagnosis]
#
# ==============================================

import math
from typing import Iterable, List, Optional

from .column_kind import ColumnKind
from .column_profile import ColumnProfile
from .diagnosis import Diagnosis, DiagnosticThresholds


def format_number(value: float) -> str:
    """Render a float without a trailing ".0" when it is integral."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class DiagnosticsEngine:
    """
    Applies the diagnostics rules to finished column profiles.
    """

    def __init__(self, thresholds: DiagnosticThresholds = None):
        """
        Initialize the engine with configurable thresholds.

        Args:
            thresholds: Optional DiagnosticThresholds. Defaults are used
                       if not provided (5% missing, 95% unique, 1e-12 range).
        """
        self.thresholds = thresholds or DiagnosticThresholds()

    def diagnose(self, profile: ColumnProfile, total_rows: int) -> Diagnosis:
        """
        Diagnose a single column.

        Args:
            profile: The finished ColumnProfile
            total_rows: Rows ingested for the whole table

        Returns:
            Diagnosis with warnings in rule order
        """
        warnings: List[str] = []

        missing_warning = self._check_missing(profile, total_rows)
        if missing_warning:
            warnings.append(missing_warning)

        if profile.kind == ColumnKind.CATEGORICAL:
            cardinality_warning = self._check_cardinality(profile, total_rows)
            if cardinality_warning:
                warnings.append(cardinality_warning)
        else:
            warnings.extend(self._check_numeric(profile))

        return Diagnosis(column=profile.name, warnings=warnings)

    def diagnose_all(self, profiles: Iterable[ColumnProfile], total_rows: int) -> List[Diagnosis]:
        return [self.diagnose(profile, total_rows) for profile in profiles]

    def _check_missing(self, profile: ColumnProfile, total_rows: int) -> Optional[str]:
        # Nothing to compare against without rows
        if total_rows <= 0:
            return None

        missing_ratio = profile.missing / total_rows
        if missing_ratio > self.thresholds.max_missing_ratio:
            return f"missing values: {_round_half_up(missing_ratio * 100)}%"
        return None

    def _check_cardinality(self, profile: ColumnProfile, total_rows: int) -> Optional[str]:
        non_missing = total_rows - profile.missing
        if non_missing <= 0:
            return None

        unique_ratio = profile.unique_count / non_missing
        if unique_ratio > self.thresholds.max_unique_ratio:
            return f"high cardinality: {unique_ratio * 100:.1f}% unique (likely identifier)"
        return None

    def _check_numeric(self, profile: ColumnProfile) -> List[str]:
        warnings = []

        if profile.min is not None and profile.max is not None:
            if abs(profile.max - profile.min) < self.thresholds.constant_tolerance:
                warnings.append("near-constant numeric column")

        if profile.numeric_parse_failures > 0:
            warnings.append("mixed numeric and non-numeric values")

        if profile.outlier_count > 0:
            warnings.append(
                f"extreme outliers detected: {profile.outlier_count} values "
                f">= {format_number(profile.outlier_z_threshold)}σ"
            )

        return warnings


def diagnose(profile: ColumnProfile, total_rows: int) -> Diagnosis:
    """Diagnose a profile with the default thresholds."""
    return DiagnosticsEngine().diagnose(profile, total_rows)
