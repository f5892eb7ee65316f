"""PayPal adapter, pluggable but not wired to PayPal's API yet."""

from paygate.common.logging import logger
from paygate.gateways.base import GatewayResult, Payment, PaymentGateway
from paygate.gateways.errors import GatewayConfigError, GatewayNotImplementedError


class PayPalGateway(PaymentGateway):
    """Holds PayPal credentials; every charge fails with `not_implemented`."""

    name = "paypal"

    def __init__(self, api_key: str, api_secret: str) -> None:
        self._api_key = api_key
        self._api_secret = api_secret

    def __repr__(self) -> str:
        return "PayPalGateway()"

    @classmethod
    def from_settings(cls, config) -> "PayPalGateway":
        missing = [
            env
            for env, value in (
                ("PAYPAL_API_KEY", config.paypal_api_key),
                ("PAYPAL_API_SECRET", config.paypal_api_secret),
            )
            if not value
        ]
        if missing:
            raise GatewayConfigError(
                f"Missing configuration for paypal: {', '.join(missing)}",
                error_code="gateway_config_missing",
            )
        return cls(api_key=config.paypal_api_key, api_secret=config.paypal_api_secret)

    async def process(self, payment: Payment) -> GatewayResult:
        logger.warning("paypal charge not sent: gateway not implemented")
        return GatewayResult.failure(GatewayNotImplementedError("PayPal"))
