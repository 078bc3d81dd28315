"""Transfer status state machine.

State Flow:
    Pending → Approved → In Transit → Completed
    Pending → Rejected
    Approved → Completed (hand-over without a separate dispatch step)

Terminal States: Completed, Rejected
"""

from typing import List

from ..models import TransferStatus


ALLOWED_TRANSITIONS = {
    TransferStatus.PENDING: [
        TransferStatus.APPROVED,
        TransferStatus.REJECTED,
    ],
    TransferStatus.APPROVED: [
        TransferStatus.IN_TRANSIT,
        TransferStatus.COMPLETED,
    ],
    TransferStatus.IN_TRANSIT: [TransferStatus.COMPLETED],
    TransferStatus.COMPLETED: [],  # Terminal state
    TransferStatus.REJECTED: [],  # Terminal state
}


class StateTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


def validate_transition(
    current_status: TransferStatus,
    new_status: TransferStatus
) -> None:
    """Validate that a state transition is allowed.

    Raises:
        StateTransitionError: If transition is not allowed
    """
    allowed = ALLOWED_TRANSITIONS.get(current_status, [])
    if new_status not in allowed:
        raise StateTransitionError(
            f"Invalid transition: {current_status.value} -> {new_status.value}. "
            f"Allowed transitions from {current_status.value}: "
            f"{[s.value for s in allowed]}"
        )


def can_transition(current_status: TransferStatus, new_status: TransferStatus) -> bool:
    return new_status in ALLOWED_TRANSITIONS.get(current_status, [])


def get_allowed_transitions(status: TransferStatus) -> List[TransferStatus]:
    return list(ALLOWED_TRANSITIONS.get(status, []))


def is_terminal(status: TransferStatus) -> bool:
    return not ALLOWED_TRANSITIONS.get(status)
