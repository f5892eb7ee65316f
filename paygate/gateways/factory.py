"""Payment gateway registry and factory.

Resolves the configured gateway name to a ready instance once at startup.
"""

from paygate.common.config import PayGateSettings, settings
from paygate.gateways.base import PaymentGateway
from paygate.gateways.errors import GatewayConfigError
from paygate.gateways.paypal import PayPalGateway
from paygate.gateways.stripe import StripeGateway


# Maps gateway names to their classes.
GATEWAY_REGISTRY: dict[str, type[PaymentGateway]] = {
    "stripe": StripeGateway,
    "paypal": PayPalGateway,
}


def get_gateway(
    gateway_name: str | None = None,
    config: PayGateSettings | None = None,
) -> PaymentGateway:
    """Build the gateway named `gateway_name` from `config`.

    Falls back to `PAYMENT_GATEWAY` and the process settings when omitted.

    Raises:
        GatewayConfigError: If the gateway is unknown or its credentials are missing

    Example:
        >>> gateway = get_gateway("stripe", PayGateSettings(stripe_api_key="sk_test_123"))
    """

    config = config or settings
    if gateway_name is None:
        gateway_name = config.payment_gateway
    gateway_name = gateway_name.lower().strip()

    if gateway_name not in GATEWAY_REGISTRY:
        supported = ", ".join(GATEWAY_REGISTRY.keys())
        raise GatewayConfigError(
            f"Unsupported payment gateway: {gateway_name}. Supported gateways: {supported}",
            error_code="unsupported_gateway",
        )
    return GATEWAY_REGISTRY[gateway_name].from_settings(config)


def register_gateway(name: str, gateway_class: type) -> None:
    """Register an additional gateway class under `name`."""

    if not isinstance(gateway_class, type) or not issubclass(gateway_class, PaymentGateway):
        raise GatewayConfigError(
            "Gateway class must extend PaymentGateway",
            error_code="invalid_gateway_class",
        )
    GATEWAY_REGISTRY[name.lower().strip()] = gateway_class


def list_available_gateways() -> list[str]:
    return list(GATEWAY_REGISTRY.keys())
