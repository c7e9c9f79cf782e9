"""FastAPI application receiving Saleor webhooks."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.config import AppConfig
from src.messaging.whatsapp import WhatsAppClient
from src.webhook.base import SaleorWebhookHandler
from src.webhook.checkout import CheckoutFullyPaidHandler
from src.webhook.manifest import build_manifest
from src.webhook.order import OrderFulfilledHandler
from src.webhook.verification import SaleorWebhookVerifier

logger = logging.getLogger(__name__)


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    config = AppConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not config.whatsapp.is_complete:
        logger.warning(
            "WHATSAPP_TOKEN or WHATSAPP_PHONE_NUMBER_ID missing; notifications will be skipped",
        )
    return create_app(config)


def create_app(
    config: AppConfig,
    client: WhatsAppClient | None = None,
) -> FastAPI:
    """Create the webhook app with one route per Saleor event."""
    app = FastAPI(docs_url=None, redoc_url=None)
    client = client or WhatsAppClient(config.whatsapp)
    verifier = SaleorWebhookVerifier(
        secret=config.webhook_secret,
        saleor_api_url=config.saleor_api_url,
    )
    handlers: list[SaleorWebhookHandler] = [
        CheckoutFullyPaidHandler(config.checkout_fully_paid, client),
        OrderFulfilledHandler(config.order_fulfilled, client),
    ]

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/manifest")
    async def manifest(request: Request) -> dict[str, Any]:
        base_url = config.app_url or str(request.base_url)
        return build_manifest(base_url, handlers)

    @app.post("/api/register")
    async def register(request: Request) -> JSONResponse:
        # The app never calls back into Saleor, so the app token is not kept.
        if not verifier.verify_instance(request.headers):
            return JSONResponse({"success": False, "message": "Unknown Saleor instance"},
                                status_code=403)
        logger.info("App registered by %s", request.headers.get("saleor-api-url", "unknown"))
        return JSONResponse({"success": True})

    for handler in handlers:
        _register_webhook(app, handler, verifier)

    return app


def _register_webhook(
    app: FastAPI,
    handler: SaleorWebhookHandler,
    verifier: SaleorWebhookVerifier,
) -> None:
    async def receive(request: Request) -> JSONResponse:
        # Raw bytes: the signature covers the body exactly as sent.
        body = await request.body()
        rejection = verifier.check(request.headers, body, handler.event)
        if rejection is not None:
            return JSONResponse(rejection.body(), status_code=rejection.status_code)

        result = await handler.handle(body)
        return JSONResponse(result.body(), status_code=result.status_code)

    app.add_api_route(
        handler.path,
        receive,
        methods=["POST"],
        name=handler.event.value.lower(),
    )
