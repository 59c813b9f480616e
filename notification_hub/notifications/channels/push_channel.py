"""
push_channel.py — Mobile push notification channel.

Block layout:

    Push para device-token-abc123
    Título: Pedido Enviado
    Mensagem: Rastreamento BR123456789

The recipient is an opaque device token. Push carries a title line in
place of the email subject, and its payment body reads "Valor" rather
than "Pagamento pendente".
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
            title="Pedido Confirmado",
            body="Pedido {order_number} confirmado!",
        ),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate(
            title="Pedido Enviado",
            body="Rastreamento {tracking_code}",
        ),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate(
            title="Pagamento Pendente",
            body="Valor {amount}",
        ),
    },
    "en_US": {
        NotificationKind.ORDER_CONFIRMATION: MessageTemplate(
            title="Order Confirmed",
            body="Order {order_number} confirmed!",
        ),
        NotificationKind.SHIPPING_UPDATE: MessageTemplate(
            title="Order Shipped",
            body="Tracking {tracking_code}",
        ),
        NotificationKind.PAYMENT_REMINDER: MessageTemplate(
            title="Payment Pending",
            body="Amount {amount}",
        ),
    },
}


class PushChannel(NotificationChannel):
    key = "push"
    label = "Push"
    title_style = TitleStyle.TITLE

    def templates(self) -> ChannelTemplates:
        return _TEMPLATES
