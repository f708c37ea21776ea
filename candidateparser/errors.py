from typing import Optional


class CandidateParseError(ValueError):
    """Base class for every way a candidate line can be rejected."""

    kind = "ParseError"

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class EmptyInput(CandidateParseError):
    kind = "EmptyInput"


class MalformedStructure(CandidateParseError):
    kind = "MalformedStructure"


class InvalidNumber(CandidateParseError):
    """A numeric field held something other than ASCII digits, or overflowed."""

    kind = "InvalidNumber"

    def __init__(self, field: str, value: str, line: Optional[str] = None,
                 reason: str = "is not a number"):
        super().__init__(f"{field} {reason}: {value!r}", line)
        self.field = field
        self.value = value


__all__ = ["CandidateParseError", "EmptyInput", "MalformedStructure", "InvalidNumber"]
