# ==============================================
# TOPIC 3: RECORD SOURCES
# ==============================================
#
# This package turns files on disk into a header plus rows of raw
# strings. The profiler never touches files itself.
#
# Modules:
# --------
# - base.py         → RecordSource interface
# - csv_source.py   → Streaming CSV reader
# - json_source.py  → Whole-document JSON loader
#
# ==============================================

from pathlib import Path
from typing import Optional, Union

from datainspect.config import ReaderConfig
from datainspect.errors import UnsupportedFileTypeError
from .base import RecordSource
from .csv_source import CsvSource
from .json_source import JsonSource, json_type


def open_source(path: Union[str, Path], reader: Optional[ReaderConfig] = None) -> RecordSource:
    """
    Pick a record source from the file extension.

    Args:
        path: Path to a .csv or .json file
        reader: Optional reader settings (delimiter, encoding)

    Returns:
        An unopened RecordSource

    Raises:
        UnsupportedFileTypeError: If the extension is not csv or json
    """
    reader = reader or ReaderConfig()
    extension = Path(path).suffix.lstrip(".")

    if extension == "csv":
        return CsvSource(path, delimiter=reader.delimiter, encoding=reader.encoding)
    if extension == "json":
        return JsonSource(path, encoding=reader.encoding)

    raise UnsupportedFileTypeError(extension)


__all__ = ["RecordSource", "CsvSource", "JsonSource", "json_type", "open_source"]
