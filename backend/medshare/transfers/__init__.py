"""Transfer workflow: status state machine and endpoints."""

from .status import (
    ALLOWED_TRANSITIONS,
    StateTransitionError,
    can_transition,
    get_allowed_transitions,
    is_terminal,
    validate_transition,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "StateTransitionError",
    "can_transition",
    "get_allowed_transitions",
    "is_terminal",
    "validate_transition",
]
