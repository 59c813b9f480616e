"""
channels — Per-channel message formatting.

Each channel class exposes:
    send_order_confirmation(recipient, order_number)
    send_shipping_update(recipient, tracking_code)
    send_payment_reminder(recipient, amount)

Channels are stateless apart from their ChannelContext. Lookup by name
lives in the registry.
"""

from notification_hub.notifications.channels.base import (
    ChannelTemplates,
    NotificationChannel,
)
from notification_hub.notifications.channels.email_channel import EmailChannel
from notification_hub.notifications.channels.push_channel import PushChannel
from notification_hub.notifications.channels.sms_channel import SmsChannel
from notification_hub.notifications.channels.whatsapp_channel import WhatsAppChannel

BUILTIN_CHANNELS = (EmailChannel, SmsChannel, PushChannel, WhatsAppChannel)

__all__ = [
    "BUILTIN_CHANNELS",
    "ChannelTemplates",
    "EmailChannel",
    "NotificationChannel",
    "PushChannel",
    "SmsChannel",
    "WhatsAppChannel",
]
