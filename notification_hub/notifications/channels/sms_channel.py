"""
sms_channel.py — SMS notification channel.

Block layout (no subject line):

    SMS para +5511999999999
    Mensagem: Pedido 12346 confirmado!

Recipients are written exactly as given; no E.164 validation is applied.
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


class SmsChannel(NotificationChannel):
    key = "sms"
    label = "SMS"

    def templates(self) -> ChannelTemplates:
        return _TEMPLATES
