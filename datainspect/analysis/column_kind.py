# ==============================================
# Column Kind State Machine
# ==============================================
#
# PURPOSE:
#   The inferred kind of a column is provisional: early evidence can be
#   revised when a numeric value shows up later in the stream. This
#   module holds that decision as an explicit tagged state plus a pure
#   transition function, so the promotion rule can be tested without
#   any streaming update around it.
#
# STATES:
# -------
#   Undetermined  → no non-empty value seen yet (reported as categorical)
#   Categorical   → owns the set of distinct raw values
#   Numeric       → owns the Welford accumulator
#
#   The uniques set and the accumulator live in different variants, so
#   a column can never be half categorical and half numeric.
#
# TRANSITIONS (on each non-empty value's category):
# -------------------------------------------------
#   Undetermined + integer/float  → Numeric (fresh accumulator)
#   Undetermined + boolean/string → Categorical (empty set)
#   Categorical  + integer/float  → Numeric (set discarded, fresh accumulator)
#   Categorical  + boolean/string → unchanged
#   Numeric      + anything       → unchanged (never reverts)
#
# ==============================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set, Union

from datainspect.inference import ValueCategory
from .running_stats import RunningMoments


class ColumnKind(Enum):
    """Externally visible kind of a column."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass
class Undetermined:
    """Only empty values seen so far; leans categorical."""

    @property
    def kind(self) -> ColumnKind:
        return ColumnKind.CATEGORICAL


@dataclass
class Categorical:
    uniques: Set[str] = field(default_factory=set)

    @property
    def kind(self) -> ColumnKind:
        return ColumnKind.CATEGORICAL


@dataclass
class Numeric:
    moments: RunningMoments = field(default_factory=RunningMoments)
    parse_failures: int = 0  # Non-empty values that did not parse as a float
    outlier_count: int = 0

    @property
    def kind(self) -> ColumnKind:
        return ColumnKind.NUMERIC


ColumnState = Union[Undetermined, Categorical, Numeric]


def initial_state(category: Optional[ValueCategory] = None) -> ColumnState:
    """
    Seed state for a column from the category of its first value.

    Args:
        category: Category of the first value, or None if it was empty

    Returns:
        Numeric for integer/float, Categorical for boolean/string,
        Undetermined when the first value was empty.
    """
    if category is None:
        return Undetermined()
    return transition(Undetermined(), category)


def transition(state: ColumnState, category: ValueCategory) -> ColumnState:
    """
    Apply one non-empty value's category to a column state.

    Returns the same object when nothing changes, a new variant otherwise.
    """
    if isinstance(state, Numeric):
        return state

    if category.is_numeric:
        return Numeric()

    if isinstance(state, Undetermined):
        return Categorical()

    return state
