"""Configuration subpackage."""

from perp_bet_hedging.config.config import (
    AppSettings,
    DashboardApiSettings,
    HedgingSettings,
    LoggingSettings,
    SamplingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DashboardApiSettings",
    "HedgingSettings",
    "LoggingSettings",
    "SamplingSettings",
    "Settings",
    "get_settings",
]
