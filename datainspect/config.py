# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - ProfilingConfig (dataclass)
#     outlier_z_threshold: float   (default 5.0)
#
# - ReaderConfig (dataclass)
#     delimiter: str               (default ",")
#     encoding: str                (default "utf-8")
#
# - AppConfig (dataclass)
#     profiling: ProfilingConfig
#     thresholds: DiagnosticThresholds
#     reader: ReaderConfig
#     log_level: str               (default "WARNING")
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# ENVIRONMENT VARIABLES:
# ----------------------
#   DATAINSPECT_OUTLIER_Z            → profiling.outlier_z_threshold
#   DATAINSPECT_MAX_MISSING_RATIO    → thresholds.max_missing_ratio
#   DATAINSPECT_MAX_UNIQUE_RATIO     → thresholds.max_unique_ratio
#   DATAINSPECT_CONSTANT_TOLERANCE   → thresholds.constant_tolerance
#   DATAINSPECT_CSV_DELIMITER        → reader.delimiter
#   DATAINSPECT_ENCODING             → reader.encoding
#   DATAINSPECT_LOG_LEVEL            → log_level
#
# USAGE:
# ------
#   from datainspect.config import get_config
#   config = get_config()
#   print(config.profiling.outlier_z_threshold)
#   print(config.thresholds.max_missing_ratio)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from datainspect.analysis.diagnosis import DiagnosticThresholds


@dataclass
class ProfilingConfig:
    """Column profiling configuration."""
    outlier_z_threshold: float = 5.0


@dataclass
class ReaderConfig:
    """Record source configuration."""
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class AppConfig:
    """Main application configuration."""
    profiling: ProfilingConfig = field(default_factory=ProfilingConfig)
    thresholds: DiagnosticThresholds = field(default_factory=DiagnosticThresholds)
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root, then the working directory
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    load_dotenv(find_dotenv(usecwd=True))

    # Build profiling configuration
    profiling_config = ProfilingConfig(
        outlier_z_threshold=float(os.getenv("DATAINSPECT_OUTLIER_Z", "5.0"))
    )

    # Build diagnostics thresholds
    thresholds = DiagnosticThresholds(
        max_missing_ratio=float(os.getenv("DATAINSPECT_MAX_MISSING_RATIO", "0.05")),
        max_unique_ratio=float(os.getenv("DATAINSPECT_MAX_UNIQUE_RATIO", "0.95")),
        constant_tolerance=float(os.getenv("DATAINSPECT_CONSTANT_TOLERANCE", "1e-12")),
    )

    # Build reader configuration
    reader_config = ReaderConfig(
        delimiter=os.getenv("DATAINSPECT_CSV_DELIMITER", ","),
        encoding=os.getenv("DATAINSPECT_ENCODING", "utf-8"),
    )

    # Build main application configuration
    _config_instance = AppConfig(
        profiling=profiling_config,
        thresholds=thresholds,
        reader=reader_config,
        log_level=os.getenv("DATAINSPECT_LOG_LEVEL", "WARNING").upper(),
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
