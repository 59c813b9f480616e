"""
registry.py — Channel factory registry.

Maps a case-insensitive channel type name to a factory producing a fresh
NotificationChannel. New channel types can be added at runtime without
touching the dispatcher.

═══════════════════════════════════════════════════════════════════════════
KEYS & FACTORIES
═══════════════════════════════════════════════════════════════════════════

    "Email", "EMAIL", "email"   →  casefold()  →  "email"  →  EmailChannel

A factory is any zero-argument callable returning a NotificationChannel.
Factories that take one positional argument, channel classes included,
are called with the registry's ChannelContext instead, so they write to
the injected sink. The arity is checked once, at register() time.

Re-registering a key replaces the previous factory (last write wins).

═══════════════════════════════════════════════════════════════════════════
THREAD SAFETY
═══════════════════════════════════════════════════════════════════════════

The factory map is guarded by an RLock. Factories run outside the lock;
channels are never shared between calls, so they need no locking.

The process-wide default registry is created lazily under a module lock
and can be discarded with reset_default_registry() (tests).
"""

from __future__ import annotations

import inspect
import logging
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from notification_hub.core.errors import InvalidChannelTypeError, UnsupportedChannelType
from notification_hub.notifications.channels import BUILTIN_CHANNELS, NotificationChannel
from notification_hub.notifications.models import ChannelContext

logger = logging.getLogger(__name__)

ChannelFactory = Union[
    Callable[[], NotificationChannel],
    Callable[[ChannelContext], NotificationChannel],
]


def normalize_channel_type(channel_type: str) -> str:
    """Case-fold a channel type key, rejecting empty or non-string keys."""
    if not isinstance(channel_type, str) or not channel_type:
        raise InvalidChannelTypeError(channel_type)
    return channel_type.casefold()


def accepts_context(factory: ChannelFactory) -> bool:
    """True when ``factory`` can be called with one positional argument."""
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


class ChannelRegistry:
    """Mutable, lock-guarded mapping of channel type → factory."""

    def __init__(
        self,
        context: Optional[ChannelContext] = None,
        factories: Iterable[Tuple[str, ChannelFactory]] = (),
    ):
        self.context = context if context is not None else ChannelContext()
        self._factories: Dict[str, Tuple[ChannelFactory, bool]] = {}
        self._lock = threading.RLock()
        for channel_type, factory in factories:
            self.register(channel_type, factory)

    @classmethod
    def with_builtin_channels(
        cls, context: Optional[ChannelContext] = None
    ) -> "ChannelRegistry":
        """Registry pre-loaded with email, sms, push and whatsapp."""
        return cls(context, ((channel.key, channel) for channel in BUILTIN_CHANNELS))

    # ── Mutation ──

    def register(self, channel_type: str, factory: ChannelFactory) -> None:
        key = normalize_channel_type(channel_type)
        if not callable(factory):
            raise TypeError(f"Channel factory for '{channel_type}' must be callable")

        entry = (factory, accepts_context(factory))

        with self._lock:
            replaced = key in self._factories
            self._factories[key] = entry

        logger.debug(
            "%s channel type '%s'",
            "Replaced" if replaced else "Registered", key,
            extra={"channel": key},
        )

    def unregister(self, channel_type: str) -> bool:
        """Remove a channel type. Returns False when it was not registered."""
        key = normalize_channel_type(channel_type)
        with self._lock:
            return self._factories.pop(key, None) is not None

    # ── Lookup ──

    def create(self, channel_type: str) -> NotificationChannel:
        """
        Build a new channel for ``channel_type``.

        Raises
        ------
        UnsupportedChannelType
            No factory is registered under the case-folded key. The error
            carries ``channel_type`` exactly as passed in.
        """
        key = channel_type.casefold() if isinstance(channel_type, str) else None

        with self._lock:
            entry = self._factories.get(key) if key else None
            if entry is None:
                available = list(self._factories)

        if entry is None:
            logger.warning(
                "Unsupported channel type '%s' (available: %s)",
                channel_type, ", ".join(sorted(available)),
                extra={"requested_type": channel_type},
            )
            raise UnsupportedChannelType(channel_type, available)

        factory, takes_context = entry
        return factory(self.context) if takes_context else factory()

    def is_registered(self, channel_type: str) -> bool:
        if not isinstance(channel_type, str) or not channel_type:
            return False
        with self._lock:
            return channel_type.casefold() in self._factories

    def available_types(self) -> List[str]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, channel_type: object) -> bool:
        return isinstance(channel_type, str) and self.is_registered(channel_type)

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)

    def __repr__(self) -> str:
        return f"ChannelRegistry(types={self.available_types()!r})"


# ═══════════════════════════════════════════════════════════════════════════
# Process-wide default
# ═══════════════════════════════════════════════════════════════════════════

_default_registry: Optional[ChannelRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> ChannelRegistry:
    """Shared registry with the built-in channels, created on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ChannelRegistry.with_builtin_channels()
        return _default_registry


def reset_default_registry() -> None:
    """Drop the shared registry; the next get_default_registry() rebuilds it."""
    global _default_registry
    with _default_lock:
        _default_registry = None
