"""PayPal adapter is pluggable but always reports not_implemented."""

import httpx
import pytest

from paygate.gateways.errors import GatewayNotImplementedError
from paygate.gateways.paypal import PayPalGateway


@pytest.fixture
def no_network(monkeypatch):
    """Fail the test if any httpx client tries to send a request."""

    async def forbidden(*args, **kwargs):
        raise AssertionError("unexpected network call")

    monkeypatch.setattr(httpx.AsyncClient, "send", forbidden)
    monkeypatch.setattr(httpx.Client, "send", forbidden)


@pytest.mark.asyncio
@pytest.mark.parametrize("expiration_date", ["12/25", "garbage"])
async def test_process_always_not_implemented(payment, no_network, expiration_date):
    """Any input yields the same typed failure, never a crash or a no-op success."""

    gateway = PayPalGateway(api_key="paypal-key", api_secret="paypal-secret")
    result = await gateway.process(payment.model_copy(update={"expiration_date": expiration_date}))

    assert not result.ok
    assert isinstance(result.error, GatewayNotImplementedError)
    assert result.error.provider == "PayPal"
    assert result.error.message == "PayPal payment gateway is not implemented"
    assert result.error.status_code == 501


def test_repr_hides_credentials():
    """Neither the key nor the secret leak through repr."""

    text = repr(PayPalGateway(api_key="paypal-key", api_secret="paypal-secret"))

    assert "paypal-key" not in text
    assert "paypal-secret" not in text
