"""
models.py — Shared data structures for the notification system.

Defines:
    • NotificationKind  — the three operations every channel implements
    • MessageTemplate   — title + body wording for one kind on one channel
    • RenderedMessage   — the fully formatted block, ready to be written
    • ChannelContext    — sink + locale handed to every channel factory
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional

from notification_hub.core.config import settings
from notification_hub.notifications.output import ConsoleSink, LineWriter


# ═══════════════════════════════════════════════════════════════════════════
# Enums
# ═══════════════════════════════════════════════════════════════════════════

class NotificationKind(str, Enum):
    """Operations supported by every channel."""
    ORDER_CONFIRMATION = "order_confirmation"
    SHIPPING_UPDATE    = "shipping_update"
    PAYMENT_REMINDER   = "payment_reminder"


class TitleStyle(str, Enum):
    """Which labelled heading line a channel prints, if any."""
    SUBJECT = "subject"   # email
    TITLE   = "title"     # push


# ═══════════════════════════════════════════════════════════════════════════
# Data Structures
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MessageTemplate:
    """
    Wording for one notification kind on one channel.

    ``body`` is a ``str.format`` template; the placeholders are
    ``order_number``, ``tracking_code`` or ``amount`` depending on the kind.
    ``title`` is ignored by channels that print no heading line.
    """
    body: str
    title: Optional[str] = None


@dataclass(frozen=True)
class RenderedMessage:
    """A formatted notification block: header, optional title, message."""
    channel: str
    kind: NotificationKind
    recipient: str
    header: str
    body: str
    title: Optional[str] = None

    def lines(self) -> Iterator[str]:
        yield self.header
        if self.title is not None:
            yield self.title
        yield self.body

    def to_text(self) -> str:
        return "\n".join(self.lines())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel": self.channel,
            "kind": self.kind.value,
            "recipient": self.recipient,
            "lines": list(self.lines()),
        }


@dataclass(frozen=True)
class ChannelContext:
    """
    Everything a channel needs besides the call arguments.

    Attributes
    ----------
    sink : LineWriter
        Receives each rendered line. Defaults to standard output.
    locale : str
        Message bundle key, e.g. ``"pt_BR"`` or ``"en_US"``.
    """
    sink: LineWriter = field(default_factory=ConsoleSink)
    locale: str = field(default_factory=lambda: settings.NOTIFICATION_LOCALE)

    def write_all(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.sink(line)
