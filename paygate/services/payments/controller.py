"""Gateway-agnostic entry point used by the HTTP boundary."""

from paygate.gateways.base import GatewayResult, Payment, PaymentGateway


class PaymentController:
    """Owns the single gateway chosen at startup and forwards every call to it."""

    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway

    async def process_payment(self, payment: Payment) -> GatewayResult:
        return await self.gateway.process(payment)
