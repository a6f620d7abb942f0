"""Clients subpackage."""

from perp_bet_hedging.clients.dashboard_api import DashboardApiRequest, Page, parse_page

__all__ = ["DashboardApiRequest", "Page", "parse_page"]
