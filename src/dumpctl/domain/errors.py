"""Error types raised while resolving a dump request.

Every error carries a stable ``code`` so services can turn it into a
structured ``ServiceError`` without string matching.
"""

from __future__ import annotations

from typing import Any


class DumpError(Exception):
    """Base for all request resolution failures."""

    code = "DUMP_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: dict[str, Any] = detail


class UnknownFieldError(DumpError, ValueError):
    """A token matched no common field, aggregate group, or field id."""

    code = "UNKNOWN_FIELD"

    def __init__(self, token: str) -> None:
        super().__init__(f"unrecognized field: {token}", token=token)
        self.token = token


class ConflictingOptionsError(DumpError):
    """Two mutually exclusive options were supplied together."""

    code = "CONFLICTING_OPTIONS"

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"{first} cannot be used with {second}", options=[first, second])


class InvalidOptionError(DumpError):
    """An option was supplied without what it depends on."""

    code = "INVALID_OPTION"


class PatternNotFoundError(DumpError):
    """``--pattern`` named a preset missing from the config file."""

    code = "PATTERN_NOT_FOUND"

    def __init__(self, domain: str, pattern: str) -> None:
        super().__init__(
            f"pattern '{pattern}' not found in [patterns.{domain}]",
            domain=domain,
            pattern=pattern,
        )
