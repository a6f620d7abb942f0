"""Dependency injection."""

from perp_bet_hedging.DI.container import Container

__all__ = ["Container"]
