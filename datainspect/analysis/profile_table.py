# ==============================================
# ProfileTable
# ==============================================
#
# PURPOSE:
#   Observe rows of raw string values and keep one ColumnProfile per
#   column index. This is the "observation engine": it drives every
#   column's update in row order and owns the total row count.
#
# CLASS: ProfileTable
# -------------------
#   Stateful: accumulates ColumnProfiles across the whole row stream.
#
#   Constructor:
#   ------------
#   - __init__(header: list[str], outlier_z_threshold: float = 5.0)
#       The header is fixed here; profiles start out absent.
#
#   Methods:
#   --------
#   - ingest(row: list[str]) -> None
#       For each column index: create the ColumnProfile on first visit
#       (seeded from the first value's category, or undetermined if the
#       value is empty), then update it with the value.
#
#   - finalize() -> ProfileTable
#       Mark ingestion complete. Further ingest() calls raise.
#
#   - profiles() -> list[ColumnProfile]
#   - get(index: int) -> ColumnProfile | None
#
#   Rows are assumed to be aligned with the header; checking row shape
#   is the record source's job.
#
# ==============================================

import logging
from typing import List, Optional, Sequence

from datainspect.inference import ValueClassifier
from .column_kind import initial_state
from .column_profile import DEFAULT_OUTLIER_Z, ColumnProfile

logger = logging.getLogger(__name__)


class ProfileTable:
    """
    Ordered collection of column profiles built from a stream of rows.
    """

    def __init__(self, header: Sequence[str], outlier_z_threshold: float = DEFAULT_OUTLIER_Z):
        """
        Initialize the ProfileTable.

        Args:
            header: Column names, in column order
            outlier_z_threshold: Passed to every ColumnProfile created
        """
        self.header: List[str] = list(header)
        self.outlier_z_threshold = outlier_z_threshold
        self.row_count: int = 0  # Total rows ingested
        self._profiles: List[Optional[ColumnProfile]] = [None] * len(self.header)
        self._finalized = False

    def ingest(self, row: Sequence[str]) -> None:
        """
        Fold one row into the column profiles.

        Args:
            row: Raw string values, one per column index
        """
        if self._finalized:
            raise RuntimeError("ProfileTable is finalized; no more rows can be ingested")

        for index, value in enumerate(row):
            profile = self._profiles[index] if index < len(self._profiles) else None
            if profile is None:
                profile = self._create_profile(index, value)
            profile.update(value)

        self.row_count += 1

    def _create_profile(self, index: int, first_value: str) -> ColumnProfile:
        """
        Materialize the profile for a column on its first visit.

        An empty first value says nothing about the type, so the column
        starts undetermined and leans categorical until real evidence arrives.
        """
        # Grow the slot list for rows wider than the header
        while index >= len(self._profiles):
            self._profiles.append(None)

        category = ValueClassifier.classify(first_value) if first_value != "" else None
        profile = ColumnProfile(
            name=self.column_name(index),
            outlier_z_threshold=self.outlier_z_threshold,
            state=initial_state(category),
        )
        self._profiles[index] = profile

        logger.debug(
            "Created profile for column %d (%s), seeded as %s",
            index, profile.name, profile.kind.value,
        )
        return profile

    def finalize(self) -> "ProfileTable":
        """
        Mark ingestion as complete and return the table for read access.
        """
        self._finalized = True
        logger.debug(
            "ProfileTable finalized: %d rows, %d columns profiled",
            self.row_count, len(self.profiles()),
        )
        return self

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def column_count(self) -> int:
        return len(self._profiles)

    def column_name(self, index: int) -> str:
        """Header name for a column index, or a positional name past the header."""
        if index < len(self.header):
            return self.header[index]
        return f"column_{index + 1}"

    def get(self, index: int) -> Optional[ColumnProfile]:
        """
        Return the profile for a column index.

        Returns:
            The ColumnProfile, or None if no row supplied that column yet.
        """
        if 0 <= index < len(self._profiles):
            return self._profiles[index]
        return None

    def profiles(self) -> List[ColumnProfile]:
        """
        Return all materialized profiles in column order.
        """
        return [profile for profile in self._profiles if profile is not None]
