"""Stripe charges adapter.

Translates a `Payment` into a form-encoded `POST /v1/charges` call and maps
the provider outcome back onto a `GatewayResult`.
"""

import asyncio
from decimal import Decimal
from time import perf_counter

import httpx

from paygate.common.logging import logger
from paygate.common.metrics import provider_request_duration_seconds
from paygate.gateways.base import GatewayResult, Payment, PaymentGateway
from paygate.gateways.errors import (
    GatewayConfigError,
    GatewayTimeoutError,
    InvalidInputError,
    RejectedError,
    TransportError,
)

STRIPE_CHARGES_URL = "https://api.stripe.com/v1/charges"


def format_amount(amount: Decimal) -> str:
    """Render the amount as a plain decimal without trailing zeros ("10.0" -> "10")."""

    text = format(amount, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def split_expiration(expiration_date: str) -> tuple[str, str]:
    """Split `MM/YY` or `MM/YYYY` into (month, year).

    Raises:
        InvalidInputError: Unless the value has exactly two non-empty parts
    """

    parts = expiration_date.split("/")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise InvalidInputError("invalid expiration date, expected MM/YY or MM/YYYY")
    month, year = parts
    return month.strip(), year.strip()


class StripeGateway(PaymentGateway):
    """Charges cards through Stripe's form-encoded charges API."""

    name = "stripe"

    def __init__(
        self,
        api_key: str,
        charges_url: str = STRIPE_CHARGES_URL,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self.charges_url = charges_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def __repr__(self) -> str:
        return f"StripeGateway(charges_url={self.charges_url!r})"

    @classmethod
    def from_settings(cls, config) -> "StripeGateway":
        if not config.stripe_api_key:
            raise GatewayConfigError(
                "Missing configuration for stripe: STRIPE_API_KEY",
                error_code="gateway_config_missing",
            )
        return cls(
            api_key=config.stripe_api_key,
            charges_url=config.stripe_charges_url,
            timeout_seconds=config.provider_timeout_seconds,
        )

    def build_params(self, payment: Payment) -> dict[str, str]:
        """Form fields for one charge request."""

        exp_month, exp_year = split_expiration(payment.expiration_date)
        return {
            "amount": format_amount(payment.amount),
            "currency": payment.currency,
            "payment_method": payment.payment_method,
            "card[number]": payment.card_number,
            "card[exp_month]": exp_month,
            "card[exp_year]": exp_year,
            "card[cvc]": payment.cvv,
        }

    async def process(self, payment: Payment) -> GatewayResult:
        try:
            params = self.build_params(payment)
        except InvalidInputError as exc:
            logger.warning("stripe charge not sent: %s", exc.message)
            return GatewayResult.failure(exc)

        start = perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                resp = await asyncio.wait_for(
                    client.post(
                        self.charges_url,
                        headers={"Authorization": f"Bearer {self._api_key}"},
                        data=params,
                    ),
                    timeout=self.timeout_seconds,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning("stripe charge timed out after %ss", self.timeout_seconds)
            return GatewayResult.failure(
                GatewayTimeoutError(f"Payment provider timed out after {self.timeout_seconds}s")
            )
        except httpx.HTTPError as exc:
            message = str(exc) or exc.__class__.__name__
            logger.error("stripe transport error: %s", message)
            return GatewayResult.failure(TransportError(message))
        finally:
            provider_request_duration_seconds.labels(gateway=self.name).observe(
                max(0.0, perf_counter() - start)
            )

        if resp.is_success:
            logger.info("stripe charge accepted status=%s", resp.status_code)
            return GatewayResult.success()

        reason = _rejection_reason(resp)
        logger.warning("stripe charge rejected status=%s reason=%s", resp.status_code, reason)
        return GatewayResult.failure(
            RejectedError(f"Payment failed: {reason}", provider_status=resp.status_code)
        )


def _rejection_reason(resp: httpx.Response) -> str:
    # Stripe error bodies look like {"error": {"message": "...", ...}}.
    try:
        message = resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    if isinstance(message, str) and message:
        return message
    return f"{resp.status_code} {resp.reason_phrase}".strip()
