"""HTTP surface for payment processing.

Deserializes the request into a `Payment`, hands it to the controller and
renders the gateway result. The gateway is built from settings when the app
starts; a missing credential aborts startup.
"""

from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import APIRouter, Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse

from paygate.common import state_machine
from paygate.common.config import settings
from paygate.common.logging import configure_logging, gateway_ctx, logger, trace_id_ctx
from paygate.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
    payment_latency_seconds,
    payment_outcomes_total,
    payment_requests_total,
)
from paygate.common.startup import log_startup_config
from paygate.common.tracing import instrument_app, setup_tracing
from paygate.gateways.base import GatewayResult, Payment
from paygate.gateways.factory import get_gateway
from paygate.services.payments.controller import PaymentController

SUCCESS_MESSAGE = "Payment successful!"
# Shared label for paths no route matched, so scans cannot grow the registry.
UNMATCHED_ROUTE = "<unmatched>"

configure_logging()
setup_tracing(settings.service_name)
router = APIRouter()


async def metrics_middleware(request: Request, call_next):
    """Record request count and latency for every HTTP call."""

    start = perf_counter()
    route = UNMATCHED_ROUTE
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


def get_controller(request: Request) -> PaymentController:
    return request.app.state.controller


def terminal_state(result: GatewayResult) -> str:
    """Map a gateway result onto its terminal per-call state."""

    if result.ok:
        return state_machine.SUCCEEDED
    return result.error.terminal_state


@router.post("/process_payment")
async def process_payment(
    payment: Payment,
    controller: PaymentController = Depends(get_controller),
    x_correlation_id: str | None = Header(default=None),
):
    """Charge one payment through the configured gateway.

    Answers 200 with "Payment successful!" or the gateway error's status
    and message.
    """

    trace_id_ctx.set(x_correlation_id or str(uuid4()))
    gateway_ctx.set(controller.gateway.name)
    payment_requests_total.labels(service=settings.service_name).inc()

    state = state_machine.RECEIVED
    with payment_latency_seconds.labels(service=settings.service_name).time():
        state_machine.validate_transition(state, state_machine.DISPATCHED)
        state = state_machine.DISPATCHED
        result = await controller.process_payment(payment)

    final_state = terminal_state(result)
    state_machine.validate_transition(state, final_state)
    payment_outcomes_total.labels(
        service=settings.service_name,
        gateway=controller.gateway.name,
        terminal_state=final_state,
    ).inc()

    if result.ok:
        logger.info("payment_processed state=%s", final_state)
        return JSONResponse(content=SUCCESS_MESSAGE, status_code=200)
    logger.warning(
        "payment_failed state=%s kind=%s status=%s",
        final_state,
        result.error.kind,
        result.error.status_code,
    )
    return JSONResponse(content=result.error.message, status_code=result.error.status_code)


@router.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@router.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}


def create_app(controller: PaymentController | None = None) -> FastAPI:
    """Build the app; without `controller` the gateway comes from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.controller is None:
            log_startup_config(settings)
            app.state.controller = PaymentController(get_gateway(config=settings))
        yield

    app = FastAPI(title="PayGate", lifespan=lifespan)
    app.state.controller = controller
    app.middleware("http")(metrics_middleware)
    app.include_router(router)
    instrument_app(app)
    return app


app = create_app()
