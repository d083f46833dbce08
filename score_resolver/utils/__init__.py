"""
Utilities package for the Round Score Resolver.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of game-log logic.
"""

from score_resolver.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
