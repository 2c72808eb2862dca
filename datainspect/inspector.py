# ==============================================
# DataInspector — Final Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties the topics together into a
#   single inspection. Users (and the CLI) interact with this class;
#   everything else is internal.
#
# HOW IT CONNECTS THE TOPICS:
#
#   ┌──────────────────────────────────────────────────┐
#   │                  DataInspector                   │
#   │                                                  │
#   │  ┌────────────────────────────────────────┐      │
#   │  │ TOPIC 3: SOURCES                       │      │
#   │  │  open_source() → CsvSource / JsonSource│      │
#   │  └──────────────┬─────────────────────────┘      │
#   │                 │ header + rows of raw strings   │
#   │                 ▼                                │
#   │  ┌────────────────────────────────────────┐      │
#   │  │ TOPIC 1 + 2: PROFILING                 │      │
#   │  │  ProfileTable.ingest(row)              │      │
#   │  │   └─ ColumnProfile.update(value)       │      │
#   │  │       └─ ValueClassifier.classify()    │      │
#   │  └──────────────┬─────────────────────────┘      │
#   │                 │ finalize()                     │
#   │                 ▼                                │
#   │  ┌────────────────────────────────────────┐      │
#   │  │ TOPIC 2: DIAGNOSTICS                   │      │
#   │  │  DiagnosticsEngine.diagnose_all()      │      │
#   │  └────────────────────────────────────────┘      │
#   └──────────────────────────────────────────────────┘
#
# CLASS: DataInspector
# --------------------
#   - __init__(config: AppConfig | None = None)
#   - inspect(path) -> InspectionResult
#       Source failures propagate; nothing partial is returned.
#   - profile_rows(header, rows) -> ProfileTable
#       Run the profiler over rows that did not come from a file.
#
# ==============================================

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from datainspect.analysis import Diagnosis, DiagnosticsEngine, ProfileTable
from datainspect.config import AppConfig, get_config
from datainspect.sources import open_source

logger = logging.getLogger(__name__)


@dataclass
class InspectionResult:
    """Everything the reporter needs about one inspected file."""
    file_type: str
    header: List[str]
    table: ProfileTable
    diagnoses: List[Diagnosis] = field(default_factory=list)
    field_types: Dict[str, str] = field(default_factory=dict)  # JSON only

    @property
    def row_count(self) -> int:
        return self.table.row_count


class DataInspector:
    """
    Reads a file, profiles every column and diagnoses the result.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the inspector.

        Args:
            config: Optional configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._diagnostics = DiagnosticsEngine(self._config.thresholds)

    def inspect(self, path: Union[str, Path]) -> InspectionResult:
        """
        Inspect a CSV or JSON file.

        Args:
            path: File to inspect

        Returns:
            InspectionResult with the finalized table and its diagnoses

        Raises:
            DataInspectError: If the file cannot be read or is malformed
        """
        start_time = time.time()
        source = open_source(path, self._config.reader)

        with source:
            table = self.profile_rows(source.header, source.rows())
            field_types = source.field_types()

        diagnoses = self.diagnose(table)

        logger.info(
            "Inspected %s: %d rows, %d columns in %.3fs",
            path, table.row_count, table.column_count, time.time() - start_time,
        )

        return InspectionResult(
            file_type=source.file_type,
            header=list(source.header),
            table=table,
            diagnoses=diagnoses,
            field_types=field_types,
        )

    def profile_rows(self, header: Sequence[str], rows: Iterable[Sequence[str]]) -> ProfileTable:
        """
        Profile an in-memory or streamed sequence of rows.

        Args:
            header: Column names
            rows: Rows of raw strings aligned to the header

        Returns:
            The finalized ProfileTable
        """
        table = ProfileTable(header, outlier_z_threshold=self._config.profiling.outlier_z_threshold)
        for row in rows:
            table.ingest(row)
        return table.finalize()

    def diagnose(self, table: ProfileTable) -> List[Diagnosis]:
        """Diagnose every profile of a finalized table."""
        return self._diagnostics.diagnose_all(table.profiles(), table.row_count)
