# ==============================================
# ColumnProfile
# ==============================================
#
# PURPOSE:
#   Stateful aggregator for ONE column. Consumes the column's raw
#   string values one at a time, in row order, and keeps everything
#   the reporter and the diagnostics rules need to know about it.
#
# CLASS: ColumnProfile (dataclass)
# --------------------------------
#   Attributes:
#   -----------
#   - name: str                      → Column label from the header
#   - outlier_z_threshold: float     → z-score at which a value counts as an outlier (5.0)
#   - total: int                     → Values seen, empty ones included
#   - missing: int                   → Empty values seen
#   - category_counts: dict          → {ValueCategory.INTEGER: 45, ValueCategory.STRING: 2}
#   - state: ColumnState             → Undetermined | Categorical | Numeric
#
#   Computed Properties:
#   --------------------
#   - kind            → ColumnKind.NUMERIC / ColumnKind.CATEGORICAL
#   - uniques         → distinct raw values (categorical only)
#   - min / max / mean / m2 / stddev / numeric_count
#   - numeric_parse_failures / outlier_count
#   - inferred_type   → "integer" | "float" | "boolean" | "string" | "unknown"
#
#   Methods:
#   --------
#   - update(raw: str) -> None
#       1. count the value (missing if empty, then stop)
#       2. classify it and run the kind transition
#       3. numeric: parse → outlier test on PRIOR moments → Welford fold
#          categorical: add to the uniques set
#
#   Values seen while the column was still categorical are never folded
#   into the numeric moments after a promotion; accumulation starts with
#   the value that caused it.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Dict, Optional, Set

from datainspect.inference import ValueCategory, ValueClassifier
from .column_kind import (
    Categorical,
    ColumnKind,
    ColumnState,
    Numeric,
    Undetermined,
    transition,
)

DEFAULT_OUTLIER_Z = 5.0


@dataclass
class ColumnProfile:
    """
    Holds the running profile of a single column.

    The kind starts provisional and can be promoted once from categorical
    to numeric; it never goes back.
    """

    # --- Core identity ---
    name: str
    outlier_z_threshold: float = DEFAULT_OUTLIER_Z

    # --- Counters ---
    total: int = 0
    missing: int = 0
    category_counts: Dict[ValueCategory, int] = field(default_factory=dict)

    # --- Kind + kind-specific sub-state ---
    state: ColumnState = field(default_factory=Undetermined)

    # ======================================
    # Update logic
    # ======================================
    def update(self, raw: str) -> None:
        """
        Fold one raw value into the profile.

        Args:
            raw: The raw text value for this column in the current row
        """
        self.total += 1

        if raw == "":
            self.missing += 1
            return

        category = ValueClassifier.classify(raw)
        self.category_counts[category] = self.category_counts.get(category, 0) + 1

        self.state = transition(self.state, category)

        if isinstance(self.state, Numeric):
            self._update_numeric(self.state, raw)
        elif isinstance(self.state, Categorical):
            self.state.uniques.add(raw)

    def _update_numeric(self, state: Numeric, raw: str) -> None:
        x = ValueClassifier.parse_float(raw)
        if x is None:
            state.parse_failures += 1
            return

        # Judge x against the moments as they stood before it arrived
        z = state.moments.zscore(x)
        if z is not None and z >= self.outlier_z_threshold:
            state.outlier_count += 1

        state.moments.push(x)

    # ======================================
    # Computed properties
    # ======================================
    @property
    def kind(self) -> ColumnKind:
        return self.state.kind

    @property
    def non_missing(self) -> int:
        """Values that were not empty."""
        return self.total - self.missing

    @property
    def uniques(self) -> Optional[Set[str]]:
        """
        Distinct non-empty raw values seen while categorical.

        Returns:
            A copy of the set, an empty set if the column is still
            undetermined, or None once the column is numeric.
        """
        if isinstance(self.state, Categorical):
            return set(self.state.uniques)
        if isinstance(self.state, Undetermined):
            return set()
        return None

    @property
    def unique_count(self) -> Optional[int]:
        if isinstance(self.state, Categorical):
            return len(self.state.uniques)
        if isinstance(self.state, Undetermined):
            return 0
        return None

    @property
    def numeric_count(self) -> int:
        """Values successfully folded into the numeric moments."""
        if isinstance(self.state, Numeric):
            return self.state.moments.count
        return 0

    @property
    def numeric_parse_failures(self) -> int:
        if isinstance(self.state, Numeric):
            return self.state.parse_failures
        return 0

    @property
    def outlier_count(self) -> int:
        if isinstance(self.state, Numeric):
            return self.state.outlier_count
        return 0

    @property
    def min(self) -> Optional[float]:
        if isinstance(self.state, Numeric):
            return self.state.moments.min
        return None

    @property
    def max(self) -> Optional[float]:
        if isinstance(self.state, Numeric):
            return self.state.moments.max
        return None

    @property
    def mean(self) -> Optional[float]:
        """Running mean, or None before the first numeric sample."""
        if isinstance(self.state, Numeric) and self.state.moments.count > 0:
            return self.state.moments.mean
        return None

    @property
    def m2(self) -> float:
        if isinstance(self.state, Numeric):
            return self.state.moments.m2
        return 0.0

    @property
    def stddev(self) -> Optional[float]:
        """
        Sample standard deviation (Bessel-corrected).

        Returns:
            sqrt(m2 / (count - 1)) when more than one sample was folded,
            otherwise None.
        """
        if isinstance(self.state, Numeric):
            return self.state.moments.stddev
        return None

    @property
    def inferred_type(self) -> str:
        """
        Human-facing type name for the column.

        Numeric columns are "float" as soon as any float literal was seen,
        "integer" otherwise. Categorical columns are "boolean" only when
        every non-empty value was a boolean literal.
        """
        if not self.category_counts:
            return "unknown"

        if self.kind == ColumnKind.NUMERIC:
            if self.category_counts.get(ValueCategory.FLOAT):
                return ValueCategory.FLOAT.value
            return ValueCategory.INTEGER.value

        if set(self.category_counts) == {ValueCategory.BOOLEAN}:
            return ValueCategory.BOOLEAN.value
        return ValueCategory.STRING.value
