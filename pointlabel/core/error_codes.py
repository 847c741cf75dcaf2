"""
Structured error codes for configuration and input precondition failures.
Dropped points are outcomes, not errors; nothing here is raised for them.
"""

from __future__ import annotations

# Known error keys (carried by PlacementConfigError.code)
INVALID_LABEL_SIZE = "invalid_label_size"
EMPTY_OFFSETS = "empty_offsets"
INVALID_OFFSET = "invalid_offset"
INVALID_INDEX_KIND = "invalid_index_kind"
INVALID_CELL_SIZE = "invalid_cell_size"
INVALID_POINT = "invalid_point"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_LABEL_SIZE: "Label width and height must be positive finite numbers.",
    EMPTY_OFFSETS: "At least one candidate offset is required.",
    INVALID_OFFSET: "Candidate offsets must be finite (dx, dy) pairs.",
    INVALID_INDEX_KIND: "Index must be one of 'auto', 'linear' or 'grid'.",
    INVALID_CELL_SIZE: "Grid cell size must be finite and not far below the label size.",
    INVALID_POINT: "Point coordinates must be finite numbers.",
}


class PlacementConfigError(ValueError):
    """Precondition violation detected before any placement work."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = user_message(code)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def user_message(error_key: str | None, fallback: str = "Invalid placement configuration.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
