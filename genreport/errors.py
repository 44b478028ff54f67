"""
Errors raised while reading generation reports and reference data.
"""


class ReportError(ValueError):
    """Base class for input that cannot be turned into a result document."""


class MalformedInputError(ReportError):
    """The document is not well-formed XML or lacks the expected structure."""


class MissingRequiredFieldError(ReportError):
    """A field that the calculation depends on is absent."""

    def __init__(self, field: str, context: str) -> None:
        self.field = field
        self.context = context
        super().__init__(f"Missing required '{field}' field in {context}")
