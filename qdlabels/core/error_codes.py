"""
Structured error codes for locator failures.
Every exception raised by the engine carries one of these keys in `.code`;
map them to user-facing messages with user_message().
"""

from __future__ import annotations

# Known error keys
EMPTY_BOUNDING_BOX = "empty_bounding_box"
CONFIG_LOCKED = "config_locked"
INVALID_DISTANCE = "invalid_distance"
UNSET_GROUP = "unset_group"
NO_ACTIVE_GROUP = "no_active_group"
NO_CANDIDATE = "no_candidate"
FIXED_GROUP = "fixed_group"
UNSUPPORTED_TIER = "unsupported_tier"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    EMPTY_BOUNDING_BOX: "Bounding box is empty. x2 must exceed x1 and y2 must exceed y1.",
    CONFIG_LOCKED: "Locator settings cannot change once coordinates have been added. Call clear() first.",
    INVALID_DISTANCE: "Minimum distances must be non-negative numbers.",
    UNSET_GROUP: "Group id 0 is reserved. Use clear() to deactivate the current group.",
    NO_ACTIVE_GROUP: "Cannot add a label location before setting the parameter.",
    NO_CANDIDATE: "Internal error while choosing label locations.",
    FIXED_GROUP: "This locator has a fixed group; parameter() cannot change it.",
    UNSUPPORTED_TIER: "This locator has no such distance tier.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LocatorError(Exception):
    """Base class for locator failures. `.code` is one of the keys above."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        message = user_message(code)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidConfiguration(LocatorError, ValueError):
    """Degenerate bounding box, bad distance, or settings changed while not empty."""


class InvalidState(LocatorError, RuntimeError):
    """Calls made in the wrong order, e.g. add() without an active group."""


class InternalInvariantError(LocatorError, RuntimeError):
    """Corrupted internal state. Not meant to be caught; abort the render."""
