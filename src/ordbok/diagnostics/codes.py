"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by Ordbok errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing keys, shape mismatches)
        2000-2999: Formatting errors (template interpolation)
        3000-3999: Loading errors (resource discovery and parsing)
    """

    # Lookup errors (1000-1999)
    KEY_NOT_FOUND = 1001
    KEY_SHAPE_MISMATCH = 1002

    # Formatting errors (2000-2999)
    PLACEHOLDER_UNKNOWN = 2001
    PLACEHOLDER_MALFORMED = 2002
    PLACEHOLDER_TYPE_MISMATCH = 2003

    # Loading errors (3000-3999)
    NO_RESOURCES = 3001
    RESOURCE_UNREADABLE = 3002
    RESOURCE_INVALID = 3003
    LANGUAGE_UNAVAILABLE = 3004
    NO_LANGUAGE_LOADED = 3005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        language: Language code involved, if any
        key: Lookup key involved, if any
        source: Human-readable resource location, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    language: str | None = None
    key: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[RESOURCE_INVALID]: Resource is not valid JSON
              --> resources/en-US.lang
              = language: en-US
              = help: Check the file for trailing commas

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.source:
            lines.append(f"  --> {self.source}")
        if self.language:
            lines.append(f"  = language: {self.language}")
        if self.key:
            lines.append(f"  = key: {self.key}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
