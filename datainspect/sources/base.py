# ==============================================
# RecordSource
# ==============================================
#
# PURPOSE:
#   Common shape of everything that feeds the profiler: a header of
#   column names plus a stream of rows, each row an ordered list of
#   raw strings aligned to that header. Empty strings mean "missing".
#
# CLASS: RecordSource (abstract)
# ------------------------------
#   - file_type: str               → "CSV" / "JSON", used by the reporter
#   - header: list[str]            → Available after open()
#   - open() / close()             → Also usable as a context manager
#   - rows() -> Iterator[list[str]]
#   - field_types() -> dict[str, str]   → Native field types (JSON only)
#
#   Failures raise DataInspectError subclasses and must abort the
#   inspection; a source never yields a partial, unlabeled result.
#
# ==============================================

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, List, Union


class RecordSource(ABC):
    """
    Supplies a header and index-aligned rows of raw string values.
    """

    file_type: str = ""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.header: List[str] = []

    @abstractmethod
    def open(self) -> None:
        """Open the underlying file and read the header."""

    @abstractmethod
    def rows(self) -> Iterator[List[str]]:
        """Yield rows in source order."""

    def field_types(self) -> Dict[str, str]:
        """Source-native type name per field; empty when the format has none."""
        return {}

    def close(self) -> None:
        """Release the underlying file, if any."""

    def __enter__(self) -> "RecordSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
