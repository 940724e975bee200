"""Domain-specific exceptions — framework-independent."""


class ValidationError(ValueError):
    """Raised when a record is built with a missing or out-of-range value."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RecordParseError(Exception):
    """Raised when a persisted line cannot be turned back into a record."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}")


class RecordFileNotFoundError(Exception):
    """Raised when loading from a file that does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")
