# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, HEDGING__ENTRY_ODD.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from perp_bet_hedging.exceptions import InvalidStrategyParametersError
from perp_bet_hedging.models.price_domain import PriceDomain
from perp_bet_hedging.models.strategy_parameters import StrategyParameters


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "perp-bet-hedging"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/perp_bet_hedging.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class HedgingSettings(BaseSettings):
    """Default strategy parameters (from env HEDGING__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    capital_polymarket: float = Field(default=5000.0, gt=0, description="Polymarket capital.")
    position_size_perp: float = Field(
        default=50000.0,
        gt=0,
        description="Perpdex short position size after leverage.",
    )
    perp_entry_price: float = Field(default=104370.0, gt=0, description="Perpdex short entry price.")
    condition_price: float = Field(
        default=104000.0,
        gt=0,
        description="Price at which the Polymarket condition resolves.",
    )
    entry_odd: float = Field(default=0.50, ge=0.0, le=1.0, description="Yes odd paid per share.")
    resolve_odd: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Early-sale odd. None resolves on final price (1.0 win, 0.0 lose).",
    )
    stop_loss_price: Optional[float] = Field(default=None, gt=0)
    take_profit_price: Optional[float] = Field(default=None, gt=0)
    # Raw string from env so pydantic-settings does not try to JSON-decode it (list[float] would trigger json.loads).
    chart_odds_raw: str = Field(
        default="0.30,0.50,0.63,0.80",
        description="Entry odds plotted on the chart, comma-separated. Env: HEDGING__CHART_ODDS.",
        validation_alias="chart_odds",
    )

    @computed_field
    @property
    def chart_odds(self) -> list[float]:
        """Parse comma-separated chart_odds_raw into a list of floats.

        Raises:
            InvalidStrategyParametersError: If an entry is not a number.
        """
        if not self.chart_odds_raw or not self.chart_odds_raw.strip():
            return []
        try:
            return [float(s.strip()) for s in self.chart_odds_raw.split(",") if s.strip()]
        except ValueError as e:
            raise InvalidStrategyParametersError(
                f"invalid HEDGING__CHART_ODDS value {self.chart_odds_raw!r}: {e}",
                field="chart_odds",
            ) from e

    def to_parameters(self, **overrides: Any) -> StrategyParameters:
        """Build validated StrategyParameters from these defaults; None overrides are ignored.

        Raises:
            InvalidStrategyParametersError: If the combined values are invalid.
        """
        values: dict[str, Any] = {
            "capital_polymarket": self.capital_polymarket,
            "position_size_perp": self.position_size_perp,
            "perp_entry_price": self.perp_entry_price,
            "condition_price": self.condition_price,
            "entry_odd": self.entry_odd,
            "resolve_odd": self.resolve_odd,
            "stop_loss_price": self.stop_loss_price,
            "take_profit_price": self.take_profit_price,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return StrategyParameters.create(**values)


class SamplingSettings(BaseSettings):
    """Price domain and sampling density (from env SAMPLING__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    min_price: float = Field(default=85000.0, gt=0)
    max_price: float = Field(default=130000.0, gt=0)
    step: float = Field(default=500.0, gt=0, description="Uniform grid interval.")
    band_half_width: float = Field(
        default=500.0,
        ge=0,
        description="Half width of the dense band around the condition price.",
    )
    band_step: float = Field(default=50.0, gt=0, description="Dense band interval.")
    epsilon: float = Field(
        default=0.01,
        gt=0,
        description="Offset of the two points straddling the condition price.",
    )

    def to_domain(self, **overrides: Any) -> PriceDomain:
        """Build a PriceDomain; None overrides are ignored.

        Raises:
            InvalidPriceDomainError: If min_price >= max_price.
        """
        values: dict[str, Any] = {
            "min_price": self.min_price,
            "max_price": self.max_price,
            "step": self.step,
            "band_half_width": self.band_half_width,
            "band_step": self.band_step,
            "epsilon": self.epsilon,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return PriceDomain(**values)


class DashboardApiSettings(BaseSettings):
    """Sweeps dashboard REST API (from env DASHBOARD_API__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    base_url: str = Field(
        default="http://localhost:8080",
        description="Dashboard API base URL.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, SAMPLING__STEP.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    hedging: HedgingSettings = Field(default_factory=HedgingSettings)
    sampling: SamplingSettings = Field(default_factory=SamplingSettings)
    dashboard_api: DashboardApiSettings = Field(default_factory=DashboardApiSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(sampling={"step": 250})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from perp_bet_hedging.config import get_settings

        settings = get_settings()
        params = settings.hedging.to_parameters()
        domain = settings.sampling.to_domain()
    """
    return Settings()
