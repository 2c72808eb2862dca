"""
Plain-text rendering of an InspectionResult.

Layout:

    File type: CSV
    Rows: 3
    Columns:
      - id
    Inferred types:
      - id: integer
    Summary:
      - id (integer): count=3 min=1 max=3 mean=2 stddev=1
    Diagnostics:
      - id: ok
"""

from typing import List, Optional

from datainspect.analysis import ColumnKind, ColumnProfile, Diagnosis
from datainspect.analysis.diagnostics import format_number
from datainspect.inspector import InspectionResult

UNKNOWN = "unknown"


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else format_number(value)


class Reporter:
    """Renders inspection results for humans."""

    def render(
        self,
        result: InspectionResult,
        show_types: bool = False,
        show_summary: bool = False,
        show_diagnostics: bool = False,
    ) -> str:
        lines: List[str] = [f"File type: {result.file_type}"]

        if result.file_type == "JSON":
            lines.extend(self._render_fields(result, show_types))
        else:
            lines.extend(self._render_columns(result, show_types))

        if show_summary:
            lines.append("Summary:")
            for index, name in enumerate(result.header):
                lines.append(self._summary_line(name, result.table.get(index)))

        if show_diagnostics:
            lines.append("Diagnostics:")
            for diagnosis in self._diagnoses_in_order(result):
                lines.append(f"  - {diagnosis.column}: {diagnosis.summary()}")

        return "\n".join(lines)

    def _render_columns(self, result: InspectionResult, show_types: bool) -> List[str]:
        lines = [f"Rows: {result.row_count}", "Columns:"]
        lines.extend(f"  - {name}" for name in result.header)

        if show_types:
            lines.append("Inferred types:")
            for index, name in enumerate(result.header):
                profile = result.table.get(index)
                dtype = profile.inferred_type if profile else UNKNOWN
                lines.append(f"  - {name}: {dtype}")
        return lines

    def _render_fields(self, result: InspectionResult, show_types: bool) -> List[str]:
        lines = [f"Records: {result.row_count}", "Fields:"]
        for name in result.header:
            if show_types:
                lines.append(f"  - {name}: {result.field_types.get(name, UNKNOWN)}")
            else:
                lines.append(f"  - {name}")
        return lines

    def _summary_line(self, name: str, profile: Optional[ColumnProfile]) -> str:
        if profile is None:
            return f"  - {name} ({UNKNOWN}): count=0"

        prefix = f"  - {name} ({profile.inferred_type})"

        if profile.kind == ColumnKind.NUMERIC:
            parts = [f"count={profile.numeric_count}"]
            if profile.numeric_count:
                parts.extend([
                    f"min={_fmt(profile.min)}",
                    f"max={_fmt(profile.max)}",
                    f"mean={_fmt(profile.mean)}",
                    f"stddev={_fmt(profile.stddev)}",
                ])
            if profile.numeric_parse_failures:
                parts.append(f"failures={profile.numeric_parse_failures}")
            if profile.outlier_count:
                parts.append(f"outliers={profile.outlier_count}")
        else:
            parts = [f"count={profile.non_missing}", f"unique={profile.unique_count}"]

        if profile.missing:
            parts.append(f"missing={profile.missing}")

        return f"{prefix}: {' '.join(parts)}"

    def _diagnoses_in_order(self, result: InspectionResult) -> List[Diagnosis]:
        # Diagnoses follow the materialized profiles; columns that never got
        # a profile are reported as clean
        remaining = iter(result.diagnoses)
        ordered = []
        for index, name in enumerate(result.header):
            if result.table.get(index) is None:
                ordered.append(Diagnosis(column=name))
            else:
                ordered.append(next(remaining))
        return ordered
