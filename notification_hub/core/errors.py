"""
Centralised error handling — exception hierarchy.

Provides:
    • A base class carrying a machine-readable error code and details
    • The channel lookup / registration errors raised by the registry
    • The template lookup error raised by channels

Usage:
    from notification_hub.core.errors import UnsupportedChannelType

    try:
        registry.create("fax")
    except UnsupportedChannelType as exc:
        print(exc.requested_type, exc.details["available"])
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


# ═══════════════════════════════════════════════════════════════════════════
# Exception Hierarchy
# ═══════════════════════════════════════════════════════════════════════════

class NotificationHubError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        *,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class UnsupportedChannelType(NotificationHubError, ValueError):
    """No channel factory is registered for the requested type."""

    def __init__(self, requested_type: str, available: Iterable[str] = ()):
        self.requested_type = requested_type
        super().__init__(
            message=f"Notification channel type '{requested_type}' is not supported",
            error_code="UNSUPPORTED_CHANNEL_TYPE",
            details={
                "requested_type": requested_type,
                "available": sorted(available),
            },
        )


class InvalidChannelTypeError(NotificationHubError, ValueError):
    """Channel type key is empty or not a string."""

    def __init__(self, channel_type: Any):
        super().__init__(
            message=f"Channel type must be a non-empty string, got {channel_type!r}",
            error_code="INVALID_CHANNEL_TYPE",
            details={"channel_type": repr(channel_type)},
        )


class TemplateNotFoundError(NotificationHubError, LookupError):
    """A channel has no message template for a locale / notification kind."""

    def __init__(self, channel: str, locale: str, kind: str):
        super().__init__(
            message=f"No '{kind}' template for channel '{channel}' in locale '{locale}'",
            error_code="TEMPLATE_NOT_FOUND",
            details={"channel": channel, "locale": locale, "kind": kind},
        )
