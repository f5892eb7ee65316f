"""Base classes for the payment gateway abstraction.

Every provider adapter implements `PaymentGateway.process`, so the
controller and the HTTP boundary never depend on a concrete provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paygate.gateways.errors import GatewayError


class Payment(BaseModel):
    """Normalized payment request, immutable once built.

    Accepts both snake_case and camelCase keys. Card fields are kept out of
    `repr` so a logged model never leaks them.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    amount: Decimal = Field(ge=0)
    currency: str
    payment_method: str
    card_number: str = Field(repr=False)
    expiration_date: str = Field(repr=False)
    cvv: str = Field(repr=False)


@dataclass(frozen=True)
class GatewayResult:
    """Outcome of one `process` call: success, or exactly one `GatewayError`."""

    error: GatewayError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "GatewayResult":
        return cls()

    @classmethod
    def failure(cls, error: GatewayError) -> "GatewayResult":
        return cls(error=error)


class PaymentGateway(ABC):
    """Abstract base class for provider adapters.

    Implementations must not mutate the payment, must not raise for expected
    failures, and perform at most one outbound call per `process`.
    """

    name = "base"

    @classmethod
    @abstractmethod
    def from_settings(cls, config) -> "PaymentGateway":
        """Build the gateway from process settings.

        Raises:
            GatewayConfigError: If a credential the gateway needs is unset
        """

    @abstractmethod
    async def process(self, payment: Payment) -> GatewayResult:
        """Charge `payment` with the provider and report the outcome."""
