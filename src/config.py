"""Runtime configuration for the notifier, read once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_WHATSAPP_API_BASE = "https://graph.facebook.com/v24.0"
DEFAULT_CHECKOUT_FALLBACK_PHONE = "522211664477"
DEFAULT_LANGUAGE_CODE = "es"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class WhatsAppConfig:
    """Credentials and endpoint for the WhatsApp Cloud API."""

    access_token: str | None = None
    phone_number_id: str | None = None
    api_base: str = DEFAULT_WHATSAPP_API_BASE

    @property
    def is_complete(self) -> bool:
        return bool(self.access_token) and bool(self.phone_number_id)

    @property
    def messages_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.phone_number_id}/messages"


@dataclass(frozen=True)
class EventNotificationConfig:
    """Per-event template settings and destination fallback policy."""

    template_name: str
    default_greeting: str
    language_code: str = DEFAULT_LANGUAGE_CODE
    fallback_phone_enabled: bool = False
    fallback_phone: str | None = None

    def resolve_phone(self, phone: str | None) -> str | None:
        """Return the payload phone, else the fallback when enabled."""
        if phone:
            return phone
        if self.fallback_phone_enabled and self.fallback_phone:
            return self.fallback_phone
        return None


def _default_checkout_config() -> EventNotificationConfig:
    return EventNotificationConfig(
        template_name="payment_successful",
        default_greeting="querido comprador",
        fallback_phone_enabled=True,
        fallback_phone=DEFAULT_CHECKOUT_FALLBACK_PHONE,
    )


def _default_order_config() -> EventNotificationConfig:
    return EventNotificationConfig(
        template_name="shipment_send",
        default_greeting="querido cliente",
    )


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration handed to ``create_app``."""

    whatsapp: WhatsAppConfig = field(default_factory=WhatsAppConfig)
    checkout_fully_paid: EventNotificationConfig = field(
        default_factory=_default_checkout_config,
    )
    order_fulfilled: EventNotificationConfig = field(
        default_factory=_default_order_config,
    )
    saleor_host_url: str | None = None
    app_url: str | None = None
    webhook_secret: str | None = None
    log_level: str = "INFO"

    @property
    def saleor_api_url(self) -> str | None:
        if not self.saleor_host_url:
            return None
        return f"{self.saleor_host_url.rstrip('/')}/graphql/"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build configuration from environment variables.

        Raises ConfigError for malformed boolean flags.
        """
        env = os.environ if environ is None else environ
        language = env.get("NOTIFICATION_LANGUAGE") or DEFAULT_LANGUAGE_CODE

        whatsapp = WhatsAppConfig(
            access_token=env.get("WHATSAPP_TOKEN") or None,
            phone_number_id=env.get("WHATSAPP_PHONE_NUMBER_ID") or None,
            api_base=env.get("WHATSAPP_API_BASE") or DEFAULT_WHATSAPP_API_BASE,
        )
        checkout = EventNotificationConfig(
            template_name="payment_successful",
            default_greeting="querido comprador",
            language_code=language,
            fallback_phone_enabled=_env_bool(env, "CHECKOUT_FALLBACK_PHONE_ENABLED", True),
            fallback_phone=env.get("CHECKOUT_FALLBACK_PHONE", DEFAULT_CHECKOUT_FALLBACK_PHONE)
            or None,
        )
        order = EventNotificationConfig(
            template_name="shipment_send",
            default_greeting="querido cliente",
            language_code=language,
            fallback_phone_enabled=_env_bool(env, "ORDER_FALLBACK_PHONE_ENABLED", False),
            fallback_phone=env.get("ORDER_FALLBACK_PHONE") or None,
        )
        return cls(
            whatsapp=whatsapp,
            checkout_fully_paid=checkout,
            order_fulfilled=order,
            saleor_host_url=(
                env.get("SALEOR_HOST_URL") or env.get("NEXT_PUBLIC_SALEOR_HOST_URL") or None
            ),
            app_url=env.get("APP_URL") or None,
            webhook_secret=env.get("SALEOR_WEBHOOK_SECRET") or None,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {raw!r}")
