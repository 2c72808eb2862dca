import csv
import logging
import sys
from pathlib import Path
from typing import IO, Iterator, List, Optional, Union

from datainspect.errors import MalformedRowError, SourceReadError
from .base import RecordSource

logger = logging.getLogger(__name__)

# The csv module caps fields at 128 KiB by default; the limit is a C long
FIELD_SIZE_LIMIT = min(sys.maxsize, 2 ** 31 - 1)


class CsvSource(RecordSource):
    """
    Streams a CSV file row by row.

    The first row is the header. Blank lines are skipped; any other row
    with a different field count than the header raises MalformedRowError.
    """

    file_type = "CSV"

    def __init__(self, path: Union[str, Path], delimiter: str = ",", encoding: str = "utf-8"):
        super().__init__(path)
        self.delimiter = delimiter
        self.encoding = encoding
        self._file: Optional[IO[str]] = None
        self._reader = None

    def open(self) -> None:
        try:
            self._file = open(self.path, newline="", encoding=self.encoding)
        except OSError as e:
            raise SourceReadError(str(self.path), f"Failed to open CSV file: {e.strerror or e}") from e

        csv.field_size_limit(FIELD_SIZE_LIMIT)
        self._reader = csv.reader(self._file, delimiter=self.delimiter)
        try:
            header = self._next_record()
        except SourceReadError:
            self.close()
            raise
        self.header = header if header is not None else []
        logger.debug("Opened %s with %d columns", self.path, len(self.header))

    def rows(self) -> Iterator[List[str]]:
        if self._reader is None:
            raise RuntimeError("CsvSource.rows() called before open()")

        expected = len(self.header)
        while True:
            record = self._next_record()
            if record is None:
                return
            if not record:
                continue
            if len(record) != expected:
                raise MalformedRowError(
                    str(self.path), self._reader.line_num, expected, len(record)
                )
            yield record

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._reader = None

    def _next_record(self) -> Optional[List[str]]:
        try:
            return next(self._reader)
        except StopIteration:
            return None
        except csv.Error as e:
            raise SourceReadError(
                str(self.path), f"line {self._reader.line_num}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise SourceReadError(
                str(self.path), f"not valid {self.encoding} text: {e.reason}"
            ) from e
