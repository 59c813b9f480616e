"""
Notification Hub — channel registry and dispatcher for order notifications.

Quick start:
    from notification_hub.notifications.dispatcher import NotificationDispatcher

    NotificationDispatcher().send_order_confirmation("a@b.com", "1001", "email")
"""

__version__ = "1.0.0"
