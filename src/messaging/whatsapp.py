"""WhatsApp Cloud API sender for template notifications.

One POST per message to ``{api_base}/{phone_number_id}/messages``.
Delivery failures are logged and reported as a status, never raised;
transport errors from httpx propagate to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from src.config import WhatsAppConfig
from src.models import DeliveryStatus, TemplateMessage, TemplateParameter

logger = logging.getLogger(__name__)


class WhatsAppClient:
    """Sends pre-approved template messages through the WhatsApp Cloud API."""

    def __init__(self, config: WhatsAppConfig) -> None:
        self._config = config

    def build_message(
        self,
        to: str,
        template_name: str,
        language_code: str,
        parameters: Sequence[tuple[str, str]],
    ) -> TemplateMessage:
        """Compose a template message from ordered (parameter_name, text) pairs."""
        return TemplateMessage(
            to=to,
            template_name=template_name,
            language_code=language_code,
            parameters=[
                TemplateParameter(parameter_name=name, text=text)
                for name, text in parameters
            ],
        )

    async def send_template(
        self,
        to: str,
        template_name: str,
        language_code: str,
        parameters: Sequence[tuple[str, str]],
    ) -> DeliveryStatus:
        message = self.build_message(to, template_name, language_code, parameters)
        return await self.send(message)

    async def send(self, message: TemplateMessage) -> DeliveryStatus:
        """Deliver one template message.

        Returns SKIPPED without any network call when the token or the
        phone number id is not configured.
        """
        if not self._config.is_complete:
            logger.error(
                "WHATSAPP_TOKEN or WHATSAPP_PHONE_NUMBER_ID is not configured; "
                "template %s not sent",
                message.template_name,
            )
            return DeliveryStatus.SKIPPED

        headers = {
            "Authorization": f"Bearer {self._config.access_token}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(verify=True) as client:
            resp = await client.post(
                self._config.messages_url,
                json=message.to_request_body(),
                headers=headers,
            )

        if not 200 <= resp.status_code < 300:
            logger.error(
                "WhatsApp template %s to %s failed: %s %s",
                message.template_name, message.to, resp.status_code, resp.text,
            )
            return DeliveryStatus.FAILED

        logger.info(
            "WhatsApp template %s sent to %s", message.template_name, message.to,
        )
        return DeliveryStatus.SENT
