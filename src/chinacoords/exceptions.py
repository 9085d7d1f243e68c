"""Custom exception hierarchy for chinacoords."""


class ChinaCoordsError(Exception):
    """Base exception for all chinacoords errors."""


class InvalidFormat(ChinaCoordsError):
    """The provided string is not a recognised coordinate notation."""

    def __init__(self, text: str, detail: str | None = None):
        self.text = text
        self.detail = detail
        message = f"Invalid coordinate format: '{text}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class CoordinateSystemMismatch(ChinaCoordsError, TypeError):
    """A typed coordinate was passed to a conversion for another system."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected a {expected} coordinate, got {actual}")
