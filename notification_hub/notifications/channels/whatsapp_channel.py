"""
whatsapp_channel.py — Chat-style (WhatsApp) notification channel.

Same wording as SMS under a "WhatsApp" header; no title line.
"""

from __future__ import annotations

from notification_hub.notifications.channels.base import (
    ChannelTemplates,
    NotificationChannel,
)
from notification_hub.notifications.models import MessageTemplate, NotificationKind

_TEMPLATES: ChannelTemplates = {
    "pt_BR": {
        NotificationKind.ORDER_CONFIRMATION: MessageTemplate("Pedido {order_number} confirmado!"),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate("Rastreamento {tracking_code}"),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate("Pagamento pendente {amount}"),
    },
    "en_US": {
        NotificationKind.ORDER_CONFIRMATION: MessageTemplate("Order {order_number} confirmed!"),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate("Tracking {tracking_code}"),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate("Payment pending {amount}"),
    },
}


class WhatsAppChannel(NotificationChannel):
    key = "whatsapp"
    label = "WhatsApp"

    def templates(self) -> ChannelTemplates:
        return _TEMPLATES
