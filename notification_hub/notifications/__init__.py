"""
notifications — Pluggable multi-channel notification formatting.

Sub-modules:
    channels/    — Email, SMS, Push and WhatsApp formatters
    registry     — case-insensitive channel type → factory map
    dispatcher   — facade resolving a channel and invoking an operation
    templates    — per-locale wording and currency formatting
    output       — line sinks (console, memory)
    models       — data structures shared across the system
"""
