"""Central environment-driven settings for the payment service.

The process loads this once at startup. Gateway selection and provider
credentials are controlled by environment variables (see `.env.example`).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PayGateSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "paygate"
    log_level: str = "INFO"
    payment_gateway: str = "stripe"
    stripe_api_key: str | None = None
    stripe_charges_url: str = "https://api.stripe.com/v1/charges"
    paypal_api_key: str | None = None
    paypal_api_secret: str | None = None
    provider_timeout_seconds: float = Field(default=10.0, gt=0)
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = PayGateSettings()
