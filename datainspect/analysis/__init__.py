# ==============================================
# TOPIC 2: ANALYSIS & DIAGNOSTICS
# ==============================================
#
# This package profiles every column in a single pass over the rows
# and then judges each finished profile against quality rules.
#
# Two-step process:
#   Step 1 (Profiling):   Observe rows → running state per column
#   Step 2 (Diagnostics): Apply rules on finished profiles → warnings
#
# Modules:
# --------
# - running_stats.py   → Welford accumulator (mean / variance / min / max)
# - column_kind.py     → Tagged kind state + one-way promotion rule
# - column_profile.py  → Per-column aggregator
# - profile_table.py   → Drives the per-column aggregators row by row
# - diagnosis.py       → Data classes for Diagnosis and thresholds
# - diagnostics.py     → Rules on profiles, output Diagnosis
#
# ==============================================

from .column_kind import ColumnKind
from .column_profile import ColumnProfile
from .diagnosis import Diagnosis, DiagnosticThresholds
from .diagnostics import DiagnosticsEngine, diagnose
from .profile_table import ProfileTable
from .running_stats import RunningMoments

__all__ = [
    "ColumnKind",
    "ColumnProfile",
    "Diagnosis",
    "DiagnosticThresholds",
    "DiagnosticsEngine",
    "ProfileTable",
    "RunningMoments",
    "diagnose",
]
