"""Per-call payment state transitions enforced by the HTTP boundary.

Every call is terminal in one hop after dispatch; there is no retry edge.
"""

RECEIVED = "RECEIVED"
DISPATCHED = "DISPATCHED"
SUCCEEDED = "SUCCEEDED"
REJECTED = "REJECTED"
TRANSPORT_FAILED = "TRANSPORT_FAILED"
TIMED_OUT = "TIMED_OUT"
INVALID_INPUT = "INVALID_INPUT"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"

TERMINAL_STATES = frozenset(
    {SUCCEEDED, REJECTED, TRANSPORT_FAILED, TIMED_OUT, INVALID_INPUT, NOT_IMPLEMENTED}
)

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    RECEIVED: {DISPATCHED},
    DISPATCHED: set(TERMINAL_STATES),
    **{state: set() for state in TERMINAL_STATES},
}


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")
