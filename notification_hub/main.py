"""
Demonstration entry point.

Run with:
    python -m notification_hub

Or, once installed:
    notification-hub-demo

Sends one notification through each built-in channel, separated by blank
lines. Set NOTIFICATION_LOCALE=en_US for English wording.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from notification_hub.core.config import Settings, settings as default_settings
from notification_hub.core.errors import NotificationHubError
from notification_hub.core.logging_config import get_logger, setup_logging
from notification_hub.notifications.dispatcher import NotificationDispatcher
from notification_hub.notifications.models import ChannelContext
from notification_hub.notifications.output import ConsoleSink, LineWriter
from notification_hub.notifications.registry import ChannelRegistry
from notification_hub.notifications.templates import get_locale

logger = get_logger(__name__)


def run_demo(dispatcher: NotificationDispatcher, sink: LineWriter, banner: str) -> None:
    sink(banner)
    sink("")

    dispatcher.send_order_confirmation("cliente@email.com", "12345", "email")
    sink("")

    dispatcher.send_order_confirmation("+5511999999999", "12346", "sms")
    sink("")

    dispatcher.send_shipping_update("device-token-abc123", "BR123456789", "push")
    sink("")

    dispatcher.send_payment_reminder("+5511888888888", Decimal("150.00"), "whatsapp")


def main(config: Optional[Settings] = None, sink: Optional[LineWriter] = None) -> int:
    config = config or default_settings
    setup_logging(config)
    logger.info(
        "Starting %s v%s [%s]",
        config.APP_NAME, config.APP_VERSION, config.ENVIRONMENT,
    )

    sink = sink if sink is not None else ConsoleSink()
    context = ChannelContext(sink=sink, locale=config.NOTIFICATION_LOCALE)
    dispatcher = NotificationDispatcher(ChannelRegistry.with_builtin_channels(context))

    try:
        run_demo(dispatcher, sink, get_locale(config.NOTIFICATION_LOCALE).banner)
    except NotificationHubError as exc:
        logger.error("Demo aborted [%s]: %s", exc.error_code, exc.message)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
