"""
Core package — cross-cutting concerns.

Modules:
    config          — environment variables & settings
    logging_config  — JSON / pretty console logging
    errors          — exception hierarchy
"""
