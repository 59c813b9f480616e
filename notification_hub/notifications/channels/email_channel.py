"""
email_channel.py — Email notification channel.

Block layout:

    Email para cliente@email.com
    Assunto: Confirmação de Pedido
    Mensagem: Seu pedido 12345 foi confirmado!

Email is the only channel with a subject line. Nothing is actually sent;
the block is written to the context's sink.
"""

from __future__ import annotations

from notification_hub.notifications.channels.base import (
    ChannelTemplates,
    NotificationChannel,
)
from notification_hub.notifications.models import (
    MessageTemplate,
    NotificationKind,
    TitleStyle,
)

_TEMPLATES: ChannelTemplates = {
    "pt_BR": {
        NotificationKind.ORDER_CONFIRMATION: MessageTemplate(
            title="Confirmação de Pedido",
            body="Seu pedido {order_number} foi confirmado!",
        ),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate(
            title="Pedido Enviado",
            body="Rastreamento {tracking_code}",
        ),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate(
            title="Lembrete de Pagamento",
            body="Pagamento pendente {amount}",
        ),
    },
    "en_US": {
        NotificationKind.ORDER_CONFIRMATION: MessageTemplate(
            title="Order Confirmation",
            body="Your order {order_number} has been confirmed!",
        ),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate(
            title="Order Shipped",
            body="Tracking {tracking_code}",
        ),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate(
            title="Payment Reminder",
            body="Payment pending {amount}",
        ),
    },
}


class EmailChannel(NotificationChannel):
    key = "email"
    label = "Email"
    title_style = TitleStyle.SUBJECT

    def templates(self) -> ChannelTemplates:
        return _TEMPLATES
