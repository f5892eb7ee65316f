"""Shared fixtures: a sample payment and a Stripe gateway backed by a stub provider."""

import httpx
import pytest

from paygate.gateways.base import Payment
from paygate.gateways.stripe import StripeGateway

TEST_API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"
TEST_CHARGES_URL = "https://stripe.test/v1/charges"


class StubProvider:
    """Records every outbound request and answers through `handler`."""

    def __init__(self, handler=None) -> None:
        self.requests: list[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(200, json={"id": "ch_1"}))

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def gateway(self, timeout_seconds: float = 5.0) -> StripeGateway:
        return StripeGateway(
            api_key=TEST_API_KEY,
            charges_url=TEST_CHARGES_URL,
            timeout_seconds=timeout_seconds,
            transport=httpx.MockTransport(self),
        )


@pytest.fixture
def payment() -> Payment:
    return Payment(
        amount="10.0",
        currency="usd",
        payment_method="card",
        card_number="4242424242424242",
        expiration_date="12/25",
        cvv="123",
    )


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def charges_url() -> str:
    return TEST_CHARGES_URL


@pytest.fixture
def make_provider():
    """Factory for stub providers with a custom response handler."""

    return StubProvider
