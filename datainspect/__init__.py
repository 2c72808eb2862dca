# ==============================================
# datainspect — Streaming Column Profiler
# ==============================================
#
# Package Structure (3 Topics + Orchestrator):
#
# datainspect/
# ├── inference/        # Topic 1: Classify raw text values
# ├── analysis/         # Topic 2: Profile columns & diagnose quality
# ├── sources/          # Topic 3: Read CSV / JSON into rows
# ├── config.py         # Configuration management
# ├── errors.py         # Exceptions raised by record sources
# ├── inspector.py      # Final orchestrator class
# ├── reporter.py       # Plain-text rendering
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
