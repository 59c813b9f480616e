"""
dispatcher.py — Facade that sends a notification through a named channel.

    dispatcher.send_order_confirmation("a@b.com", "1001", "email")
        → registry.create("email")        (fresh EmailChannel)
        → channel.send_order_confirmation("a@b.com", "1001")

No retries, no fallback channel, no batching. An unknown channel type
raises UnsupportedChannelType before anything is written.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from notification_hub.notifications.channels import NotificationChannel
from notification_hub.notifications.models import NotificationKind
from notification_hub.notifications.registry import ChannelRegistry, get_default_registry
from notification_hub.notifications.templates import Amount

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Resolve a channel by type name and invoke the requested operation."""

    def __init__(self, registry: Optional[ChannelRegistry] = None):
        self.registry = registry if registry is not None else get_default_registry()

    def send_order_confirmation(
        self, recipient: str, order_number: str, channel_type: str
    ) -> None:
        channel = self._resolve(channel_type, NotificationKind.ORDER_CONFIRMATION)
        channel.send_order_confirmation(recipient, order_number)

    def send_shipping_update(
        self, recipient: str, tracking_code: str, channel_type: str
    ) -> None:
        channel = self._resolve(channel_type, NotificationKind.SHIPPING_UPDATE)
        channel.send_shipping_update(recipient, tracking_code)

    def send_payment_reminder(
        self, recipient: str, amount: Amount, channel_type: str
    ) -> None:
        channel = self._resolve(channel_type, NotificationKind.PAYMENT_REMINDER)
        channel.send_payment_reminder(recipient, amount)

    def send(
        self,
        kind: NotificationKind | str,
        recipient: str,
        value: Any,
        channel_type: str,
    ) -> None:
        """Generic entry point routed by NotificationKind (or its value)."""
        kind = NotificationKind(kind)
        if kind is NotificationKind.ORDER_CONFIRMATION:
            self.send_order_confirmation(recipient, value, channel_type)
        elif kind is NotificationKind.SHIPPING_UPDATE:
            self.send_shipping_update(recipient, value, channel_type)
        else:
            self.send_payment_reminder(recipient, value, channel_type)

    def _resolve(
        self, channel_type: str, kind: NotificationKind
    ) -> NotificationChannel:
        channel = self.registry.create(channel_type)
        logger.info(
            "Dispatching %s via '%s'",
            kind.value, channel_type,
            extra={"channel": channel_type, "operation": kind.value},
        )
        return channel
