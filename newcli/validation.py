"""Input checks for the filename and extension arguments."""

from __future__ import annotations

INVALID_SUBSTRINGS = ("/", "\\", "..")


class ValidationError(ValueError):
    """Raised when a filename or extension is unsafe to use."""

    def __init__(self, field: str, value: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


def _validate_field(field: str, value: str) -> None:
    for substring in INVALID_SUBSTRINGS:
        if substring in value:
            raise ValidationError(
                field,
                value,
                f"{field} '{value}' contains invalid character '{substring}'.",
            )
    if not value:
        raise ValidationError(field, value, f"{field} must not be empty.")


def validate_cli_inputs(filename: str, extension: str) -> None:
    """Reject names that could escape the working directory.

    The filename is checked before the extension, so the filename's problem is
    the one reported when both are invalid.
    """

    _validate_field("filename", filename)
    _validate_field("extension", extension)
