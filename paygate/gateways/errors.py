"""Gateway error taxonomy.

Gateways return these wrapped in a `GatewayResult` instead of raising them.
Each kind carries the HTTP status the boundary answers with and the
terminal state it ends the call in.
"""

from paygate.common import state_machine


class GatewayError(Exception):
    """Base class for expected per-request gateway failures."""

    kind = "gateway_error"
    status_code = 500
    terminal_state = state_machine.TRANSPORT_FAILED

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.message == self.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class InvalidInputError(GatewayError):
    """Payment fields cannot be translated into the provider's format."""

    kind = "invalid_input"
    status_code = 400
    terminal_state = state_machine.INVALID_INPUT


class TransportError(GatewayError):
    """The provider could not be reached."""

    kind = "transport"
    status_code = 502
    terminal_state = state_machine.TRANSPORT_FAILED


class GatewayTimeoutError(GatewayError):
    """The provider did not answer within the configured timeout."""

    kind = "timeout"
    status_code = 504
    terminal_state = state_machine.TIMED_OUT


class RejectedError(GatewayError):
    """The provider answered with a non-2xx status."""

    kind = "rejected"
    status_code = 402
    terminal_state = state_machine.REJECTED

    def __init__(self, message: str, provider_status: int | None = None):
        self.provider_status = provider_status
        super().__init__(message)


class GatewayNotImplementedError(GatewayError):
    """The gateway variant has no working backend yet."""

    kind = "not_implemented"
    status_code = 501
    terminal_state = state_machine.NOT_IMPLEMENTED

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"{provider} payment gateway is not implemented")


class GatewayConfigError(Exception):
    """Fatal startup-time misconfiguration (unknown gateway, missing keys)."""

    def __init__(self, message: str, error_code: str | None = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)
