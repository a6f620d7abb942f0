"""Logging subpackage."""

from perp_bet_hedging.logging.config import build_processors, configure_logging

__all__ = ["build_processors", "configure_logging"]
