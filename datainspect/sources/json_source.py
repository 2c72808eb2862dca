# ==============================================
# JsonSource
# ==============================================
#
# PURPOSE:
#   The simpler path: load a whole JSON document, normalize it into a
#   list of flat records, and expose those records as string rows so
#   the same profiler can run over them.
#
# NORMALIZATION:
# --------------
#   [ {..}, {..}, 3 ]   → the objects are records, other items dropped
#   [ 1, 2, 3 ] / [ ]   → one empty record
#   { .. }              → one record
#   anything else       → UnsupportedJsonStructureError
#
# VALUE → RAW STRING:
# -------------------
#   null → ""  (missing)       true/false → "true"/"false"
#   numbers → literal text     strings → unchanged
#   arrays/objects → compact JSON text
#
#   The header is the key order of the first record.
#
# ==============================================

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from datainspect.errors import SourceReadError, UnsupportedJsonStructureError
from datainspect.inference import ValueClassifier
from .base import RecordSource

logger = logging.getLogger(__name__)


def json_type(value: Any) -> str:
    """
    Name the JSON type of a decoded value.

    Returns:
        One of "integer", "float", "boolean", "string", "null", "array", "object"
    """
    if value is None:
        return "null"
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        # Integers outside the 64-bit range are only representable as floats
        if ValueClassifier.INT64_MIN <= value <= ValueClassifier.INT64_MAX:
            return "integer"
        return "float"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def to_raw(value: Any) -> str:
    """Render a decoded JSON value as the raw string the profiler consumes."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


class JsonSource(RecordSource):
    """
    Loads a JSON file and exposes its records as rows.
    """

    file_type = "JSON"

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        super().__init__(path)
        self.encoding = encoding
        self.records: List[Dict[str, Any]] = []

    def open(self) -> None:
        try:
            with open(self.path, encoding=self.encoding) as f:
                document = json.load(f)
        except OSError as e:
            raise SourceReadError(str(self.path), f"Failed to read JSON file: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise SourceReadError(str(self.path), f"not valid {self.encoding} text: {e.reason}") from e
        except json.JSONDecodeError as e:
            raise SourceReadError(str(self.path), f"Invalid JSON: {e}") from e

        self.records = self._normalize(document)
        self.header = list(self.records[0].keys())
        logger.debug("Loaded %d records from %s", len(self.records), self.path)

    def _normalize(self, document: Any) -> List[Dict[str, Any]]:
        if isinstance(document, list):
            objects = [item for item in document if isinstance(item, dict)]
            if not objects:
                # An array of primitives is a single record with no fields
                return [{}]
            return objects

        if isinstance(document, dict):
            return [document]

        raise UnsupportedJsonStructureError(str(self.path), json_type(document))

    def field_types(self) -> Dict[str, str]:
        """
        JSON type of every field of the first record, in key order.
        """
        if not self.records:
            return {}
        return {key: json_type(value) for key, value in self.records[0].items()}

    def rows(self) -> Iterator[List[str]]:
        header_keys = set(self.header)
        for index, record in enumerate(self.records):
            extra = [key for key in record if key not in header_keys]
            if extra:
                logger.debug("Record %d: ignoring fields not in header: %s", index, extra)
            yield [to_raw(record.get(key)) for key in self.header]
