"""
Exceptions raised by the record sources.

The profiling core never raises for data conditions; everything here belongs
to the collaborators that read files and is meant to abort an inspection.
"""

from typing import Optional


class DataInspectError(Exception):
    """Base exception for all datainspect errors"""
    pass


class UnsupportedFileTypeError(DataInspectError):
    """File extension is neither csv nor json"""
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension or '<none>'}")


class SourceReadError(DataInspectError):
    """The file could not be opened, decoded or parsed"""
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class MalformedRowError(DataInspectError):
    """A CSV row does not have the same number of fields as the header"""
    def __init__(self, path: str, line: int, expected: int, found: int):
        self.path = path
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(
            f"{path}: line {line}: expected {expected} fields, found {found}"
        )


class UnsupportedJsonStructureError(DataInspectError):
    """Top-level JSON value is not an object or an array"""
    def __init__(self, path: str, found: Optional[str] = None):
        self.path = path
        self.found = found
        detail = f" (found {found})" if found else ""
        super().__init__(f"{path}: Unsupported JSON structure{detail}")
