"""
base.py — Abstract notification channel.

Every channel implements the same three operations. Subclasses declare:

    key         registry name of the built-in ("email", "sms", ...)
    label       name printed in the header line ("Email", "SMS", ...)
    title_style SUBJECT / TITLE heading, or None for no heading line
    templates() per-locale wording for each NotificationKind

A channel renders the complete block before writing any of it, so a
template error never leaves a half-written notification on the sink.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Optional

from notification_hub.core.errors import TemplateNotFoundError
from notification_hub.notifications.models import (
    ChannelContext,
    MessageTemplate,
    NotificationKind,
    RenderedMessage,
    TitleStyle,
)
from notification_hub.notifications.templates import Amount, get_locale

logger = logging.getLogger(__name__)

ChannelTemplates = Mapping[str, Mapping[NotificationKind, MessageTemplate]]


class NotificationChannel(ABC):
    """Formats notifications for one channel and writes them to a sink."""

    key: ClassVar[str] = ""
    label: ClassVar[str] = ""
    title_style: ClassVar[Optional[TitleStyle]] = None

    def __init__(self, context: Optional[ChannelContext] = None):
        self.context = context or ChannelContext()

    @abstractmethod
    def templates(self) -> ChannelTemplates:
        """Return ``{locale: {NotificationKind: MessageTemplate}}``."""

    # ── Operations ──

    def send_order_confirmation(self, recipient: str, order_number: str) -> None:
        self._deliver(
            NotificationKind.ORDER_CONFIRMATION, recipient, order_number=order_number,
        )

    def send_shipping_update(self, recipient: str, tracking_code: str) -> None:
        self._deliver(
            NotificationKind.SHIPPING_UPDATE, recipient, tracking_code=tracking_code,
        )

    def send_payment_reminder(self, recipient: str, amount: Amount) -> None:
        bundle = get_locale(self.context.locale)
        self._deliver(
            NotificationKind.PAYMENT_REMINDER,
            recipient,
            amount=bundle.format_currency(amount),
        )

    # ── Rendering ──

    def render(
        self, kind: NotificationKind, recipient: str, **fields: Any
    ) -> RenderedMessage:
        """Build the block for ``kind`` without writing it."""
        locale = self.context.locale
        bundle = get_locale(locale)
        template = self._template_for(kind, locale)

        title = None
        if self.title_style is not None:
            title = bundle.heading(self.title_style, template.title or "")

        return RenderedMessage(
            channel=self.key,
            kind=kind,
            recipient=recipient,
            header=bundle.header.format(label=self.label, recipient=recipient),
            title=title,
            body=bundle.message(template.body.format(**fields)),
        )

    def _template_for(self, kind: NotificationKind, locale: str) -> MessageTemplate:
        by_kind: Dict[NotificationKind, MessageTemplate] = dict(
            self.templates().get(locale, {})
        )
        if kind not in by_kind:
            raise TemplateNotFoundError(self.key or type(self).__name__, locale, kind.value)
        return by_kind[kind]

    def _deliver(self, kind: NotificationKind, recipient: str, **fields: Any) -> None:
        message = self.render(kind, recipient, **fields)
        logger.debug(
            "[%s] %s → %s",
            self.label, kind.value, recipient,
            extra={"channel": self.key, "operation": kind.value},
        )
        self.context.write_all(message.lines())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.context.locale!r})"
